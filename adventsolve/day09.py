"""Compact a disk map and compute its filesystem checksum."""

from dataclasses import dataclass, field
from typing import Optional

_DIGITS = "0123456789"

Block = Optional[int]


@dataclass(frozen=True)
class Section:
    """A contiguous run of blocks."""

    start: int
    size: int


@dataclass
class Disk:
    """Blocks of a disk, each holding a file id or ``None`` when free."""

    blocks: list[Block] = field(default_factory=list)

    def checksum(self) -> int:
        """Sum of position times file id over all occupied blocks."""
        return sum(
            position * file_id
            for position, file_id in enumerate(self.blocks)
            if file_id is not None
        )

    def move_blocks(self) -> "Disk":
        """Fill free blocks from the front with file blocks taken from the back."""
        blocks = self.blocks
        if all(block is None for block in blocks):
            raise ValueError("disk holds no file blocks")
        moved: list[Block] = []
        front, back = 0, len(blocks) - 1
        while front <= back:
            while blocks[back] is None:
                if back == 0:
                    raise ValueError("compaction ran past the start of the disk")
                back -= 1
            if blocks[front] is not None:
                moved.append(blocks[front])
                front += 1
            if blocks[front] is None and blocks[back] is not None:
                moved.append(blocks[back])
                front += 1
                back -= 1
        return Disk(moved)

    def empty_sections(self, end: int) -> list[Section]:
        """Free runs that begin before ``end``, in order of position."""
        sections = []
        position = 0
        while position < end:
            if self.blocks[position] is None:
                size = self._free_run_length(position)
                sections.append(Section(position, size))
                position += size
            else:
                position += 1
        return sections

    def files(self) -> list[Section]:
        """File runs scanned from the end of the disk towards the start."""
        sections: list[Section] = []
        position = len(self.blocks) - 1
        while position >= 0:
            if self.blocks[position] is not None:
                section = self._file_run_ending_at(position)
                sections.append(section)
                if position <= section.size:
                    break
                position -= section.size
            else:
                position -= 1
        return sections

    def _free_run_length(self, position: int) -> int:
        size = 0
        for block in self.blocks[position:]:
            if block is not None:
                break
            size += 1
        return size

    def _file_run_ending_at(self, position: int) -> Section:
        file_id = self.blocks[position]
        start = position
        while start > 0 and self.blocks[start - 1] == file_id:
            start -= 1
        return Section(start, position - start + 1)


def parse_disk(text: str) -> Disk:
    """Expand a dense map of alternating file and free lengths into blocks."""
    blocks: list[Block] = []
    for index, char in enumerate(text):
        if char not in _DIGITS:
            raise ValueError(f"unexpected character {char!r} at position {index}")
        file_id = index // 2 if index % 2 == 0 else None
        blocks.extend([file_id] * int(char))
    return Disk(blocks)


def process_part1(text: str) -> str:
    """Checksum of the disk after moving single blocks into free space."""
    return str(parse_disk(text).move_blocks().checksum())


def process_part2(text: str) -> str:
    """Print the free runs and the file runs of the disk."""
    disk = parse_disk(text)
    print(disk.empty_sections(len(disk.blocks)))
    print(disk.files())
    return "works"