"""Load creatures from a comma-separated file and report on them."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from creaturetracker.tracker import CreatureTracker

DEFAULT_FILE = "creatures.txt"

TYPES = (
    "Fire", "Water", "Electric", "Grass", "Ice", "Fighting", "Poison", "Ground",
    "Flying", "Psychic", "Bug", "Rock", "Ghost", "Dragon", "Dark", "Steel", "Fairy",
)

SAMPLE_NAME = "Swarmstrike"


class CreatureFileError(ValueError):
    """Raised when a line of a creature file is malformed."""


def tokenise(line: str) -> list[str]:
    """Split ``line`` on commas; a single trailing empty field is dropped."""
    tokens = line.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def _parse_int(text: str) -> int:
    """Read a leading integer the way a lenient string-to-int conversion does."""
    stripped = text.lstrip()
    digits_start = 1 if stripped[:1] in ("+", "-") else 0
    end = digits_start
    while end < len(stripped) and stripped[end].isdigit():
        end += 1
    if end == digits_start:
        raise CreatureFileError(f"Invalid power value: {text!r}")
    return int(stripped[:end])


def populate_tracker(tracker: CreatureTracker, path: Union[str, Path]) -> None:
    """Add every ``name,type,power`` line of the file at ``path`` to ``tracker``."""
    with open(path, encoding="utf-8", newline="") as infile:
        for raw in infile:
            line = raw.replace("\n", "").replace("\r", "")
            tokens = tokenise(line)
            if len(tokens) != 3:
                raise CreatureFileError("Error when reading the creature file.")
            name, type_, power = tokens
            tracker.add_creature(name, type_, _parse_int(power))


def _yes_no(value: bool) -> str:
    return "true" if value else "false"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the creature file and print a short report on it."""
    parser = argparse.ArgumentParser(description="Report on a file of creatures.")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE,
                        help="file of name,type,power lines")
    args = parser.parse_args(argv)

    tracker = CreatureTracker()
    try:
        populate_tracker(tracker, args.file)
    except (OSError, CreatureFileError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    out = []
    out.append("Calling check_exists on creature that exists: "
               f"{_yes_no(tracker.creature_exists(SAMPLE_NAME))}\n\n")
    out.append("Calling check_exists on creature that does not exist: "
               f"{_yes_no(tracker.creature_exists('Random'))}\n\n")
    creature = tracker.get_creature(SAMPLE_NAME)
    shown = str(creature) if creature is not None else "(not found)"
    out.append(f"Retrieving and printing a creature: {shown}\n\n")
    out.append("Printing statistics for each type:\n")
    out.extend(f"\t{tracker.get_stats(type_)}\n" for type_ in TYPES)
    out.append("\n")
    tracker.remove_creature(SAMPLE_NAME)
    out.append("Checking removed creature does not exist: "
               f"{_yes_no(tracker.creature_exists(SAMPLE_NAME))}\n\n")
    out.append(f"{tracker}\n")
    sys.stdout.write("".join(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())