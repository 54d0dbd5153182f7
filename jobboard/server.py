"""Shared state of a job board session: the input and output streams and the members."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

from jobboard.models import Member

INPUT_FILE_NAME = "input.txt"
OUTPUT_FILE_NAME = "output.txt"


class Server:
    """Holds the command streams, the registered members and who is logged in."""

    def __init__(self, fin: TextIO, fout: TextIO):
        self._fin = fin
        self._fout = fout
        self._tokens = self._token_stream()
        self.members: list[Member] = []
        self.current_member: Optional[Member] = None

    def _token_stream(self) -> Iterator[str]:
        for line in self._fin:
            yield from line.split()

    def read_token(self) -> str:
        """Return the next whitespace-separated word of the input.

        Raises EOFError when the input is exhausted.
        """
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    def read_int(self) -> int:
        """Return the next word of the input as an integer.

        Raises EOFError at the end of input and ValueError if the word is not a number.
        """
        token = self.read_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def write(self, text: str) -> None:
        """Append text to the output stream."""
        self._fout.write(text)

    def register_member(self, member: Member) -> Member:
        """Add a member to the member list and return it."""
        self.members.append(member)
        return member

    def withdraw_member(self, member: Member) -> str:
        """Remove the given member from the member list and return its id."""
        for index, registered in enumerate(self.members):
            if registered is member:
                del self.members[index]
                break
        return member.user_id