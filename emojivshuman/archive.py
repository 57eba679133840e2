"""Reading and writing the plain-text save file of a level."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

ROWS = 5
COLS = 7

DEFAULT_ARCHIVE_TEXT = (
    "HumanGRemainingTime: 0"
    "\nStar: 100"
    "\nCoin: 10"
    "\nUPdateStarCountdown: 0"
    "\nMaxRound: 30"
    "\nRound: 0"
    "\nMAP:"
    "\n1 1 1 1 1 1 1"
    "\n1 1 1 1 1 1 1"
    "\n1 1 1 1 1 1 1"
    "\n1 1 1 1 1 1 1"
    "\n1 1 1 1 1 1 1"
    "\nPlantList:"
    "\n0"
    "\nBulletList:"
    "\n0"
    "\nHumanList:"
    "\n0"
)

_HEADER_LABELS = (
    "HumanGRemainingTime",
    "Star",
    "Coin",
    "UPdateStarCountdown",
    "MaxRound",
    "Round",
)


class ArchiveError(ValueError):
    """Raised when a save file cannot be understood."""


@dataclass
class PlantRecord:
    plant_type: int
    health: int
    row: int
    col: int
    remaining_time: int
    x: float
    y: float


@dataclass
class BulletRecord:
    code: int
    x: float
    y: float


@dataclass
class HumanRecord:
    human_type: int
    health: int
    row: int
    attack_countdown: int
    is_blood: bool
    is_slow: bool
    x: float
    y: float


def _full_map() -> list[list[bool]]:
    return [[True] * COLS for _ in range(ROWS)]


@dataclass
class Archive:
    """Everything a level needs to resume where it was left."""

    human_g_remaining_time: int = 0
    star: int = 100
    coin: int = 10
    update_star_countdown: int = 0
    max_round: int = 30
    round: int = 0
    map: list[list[bool]] = field(default_factory=_full_map)
    plants: list[PlantRecord] = field(default_factory=list)
    bullets: list[BulletRecord] = field(default_factory=list)
    humans: list[HumanRecord] = field(default_factory=list)


def default_archive() -> Archive:
    """The state of a fresh level."""
    return Archive()


class _Lines:
    def __init__(self, text: str) -> None:
        self._lines: Iterator[str] = (
            line.strip() for line in text.splitlines() if line.strip()
        )

    def next(self, what: str) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise ArchiveError(f"archive ends before {what}") from None

    def fields(self, what: str, count: int) -> list[str]:
        parts = self.next(what).split()
        if len(parts) != count:
            raise ArchiveError(f"{what} needs {count} fields, got {len(parts)}")
        return parts

    def count(self, what: str) -> int:
        value = _int(self.next(what), what)
        if value < 0:
            raise ArchiveError(f"{what} must not be negative")
        return value


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ArchiveError(f"{what}: not an integer: {token!r}") from None


def _float(token: str, what: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ArchiveError(f"{what}: not a number: {token!r}") from None


def parse_archive(text: str) -> Archive:
    """Parse the text of a save file."""
    lines = _Lines(text)
    header = []
    for label in _HEADER_LABELS:
        _, value = lines.fields(label, 2)
        header.append(_int(value, label))

    lines.next("MAP")
    grid = []
    for index in range(ROWS):
        bits = lines.next(f"map row {index + 1}").split()
        if len(bits) != COLS:
            raise ArchiveError(f"map row {index + 1} needs {COLS} cells, got {len(bits)}")
        grid.append([bit == "1" for bit in bits])

    lines.next("PlantList")
    plants = []
    for _ in range(lines.count("plant count")):
        parts = lines.fields("plant record", 7)
        ints = [_int(token, "plant record") for token in parts[:5]]
        plants.append(
            PlantRecord(*ints, _float(parts[5], "plant x"), _float(parts[6], "plant y"))
        )

    lines.next("BulletList")
    bullets = []
    for _ in range(lines.count("bullet count")):
        code, x, y = lines.fields("bullet record", 3)
        bullets.append(
            BulletRecord(
                _int(code, "bullet code"), _float(x, "bullet x"), _float(y, "bullet y")
            )
        )

    lines.next("HumanList")
    humans = []
    for _ in range(lines.count("human count")):
        parts = lines.fields("human record", 8)
        ints = [_int(token, "human record") for token in parts[:6]]
        humans.append(
            HumanRecord(
                human_type=ints[0],
                health=ints[1],
                row=ints[2],
                attack_countdown=ints[3],
                is_blood=bool(ints[4]),
                is_slow=bool(ints[5]),
                x=_float(parts[6], "human x"),
                y=_float(parts[7], "human y"),
            )
        )

    return Archive(*header, map=grid, plants=plants, bullets=bullets, humans=humans)


def _num(value: float) -> str:
    return f"{value:g}"


def format_archive(archive: Archive) -> str:
    """Render an archive as the text of a save file."""
    values = (
        archive.human_g_remaining_time,
        archive.star,
        archive.coin,
        archive.update_star_countdown,
        archive.max_round,
        archive.round,
    )
    out = [f"{label}: {value}\n" for label, value in zip(_HEADER_LABELS, values)]
    out.append("MAP:\n")
    for row in archive.map:
        out.append("".join("1 " if cell else "0 " for cell in row) + "\n")
    out.append("PlantList:\n")
    out.append(f"{len(archive.plants)}\n")
    for p in archive.plants:
        out.append(
            f"{p.plant_type} {p.health} {p.row} {p.col} {p.remaining_time} "
            f"{_num(p.x)} {_num(p.y)}\n"
        )
    out.append("BulletList:\n")
    out.append(f"{len(archive.bullets)}\n")
    for b in archive.bullets:
        out.append(f"{b.code} {_num(b.x)} {_num(b.y)}\n")
    out.append("HumanList:\n")
    out.append(f"{len(archive.humans)}\n")
    for h in archive.humans:
        out.append(
            f"{h.human_type} {h.health} {h.row} {h.attack_countdown} "
            f"{int(h.is_blood)} {int(h.is_slow)} {_num(h.x)} {_num(h.y)}\n"
        )
    return "".join(out)


def load_archive(path: str | Path) -> Archive:
    """Read a save file, creating it with a fresh level when it is missing."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        path.write_text(DEFAULT_ARCHIVE_TEXT, encoding="utf-8")
        text = DEFAULT_ARCHIVE_TEXT
    return parse_archive(text)


def save_archive(archive: Archive, path: str | Path) -> None:
    """Write an archive to a save file."""
    Path(path).write_text(format_archive(archive), encoding="utf-8")