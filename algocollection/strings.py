"""String algorithms: infix conversion, palindromes and substring search."""

from __future__ import annotations

_OPERATORS = frozenset("^*/+-()")


def precedence(op: str) -> int:
    """Binding strength of an arithmetic operator; 0 for anything else."""
    if op == "^":
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Every character that is not one of ``^*/+-()`` is copied as an operand.
    An incoming ``^`` stops popping at any operator other than ``^``.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch not in _OPERATORS:
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                if ch == "^" and stack[-1] != "^":
                    break
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same forwards and backwards."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))


def brute_force_find(text: str, pattern: str) -> int:
    """Index of the first match of ``pattern`` in ``text``, or -1.

    Only start positions with ``start + len(pattern) < len(text)`` are
    examined, so a match flush with the end of ``text`` is not reported.
    """
    width = len(pattern)
    for start in range(len(text) - width):
        if text[start : start + width] == pattern:
            return start
    return -1


class SuffixTrie:
    """Trie of every suffix of a lower-case text, for substring queries."""

    def __init__(self, text: str = "") -> None:
        self._root: dict[str, dict] = {}
        for start in range(len(text)):
            self.insert(text[start:])

    def insert(self, word: str) -> None:
        """Add the path spelling ``word``; only letters ``a``-``z`` are allowed."""
        if any(not "a" <= ch <= "z" for ch in word):
            raise ValueError(f"only lower-case letters a-z are supported: {word!r}")
        node = self._root
        for ch in word:
            node = node.setdefault(ch, {})

    def contains(self, pattern: str) -> bool:
        """True if ``pattern`` is a prefix of some inserted word."""
        node = self._root
        for ch in pattern:
            if ch not in node:
                return False
            node = node[ch]
        return True

    def __contains__(self, pattern: str) -> bool:
        return self.contains(pattern)