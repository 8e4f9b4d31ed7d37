from typing import List


class MemorySink:
    """Text sink that keeps every write in memory.

    Attributes:
        writes: One entry per ``write`` call, in call order.
    """

    def __init__(self) -> None:
        self.writes: List[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.writes)

    def lines(self) -> List[str]:
        """Written text split into lines, without newlines."""
        return self.getvalue().splitlines()

    def clear(self) -> None:
        self.writes.clear()
