import sys
import logging
import argparse
from typing import Tuple

from chaintable.hash_table import HashTable, InvalidArgument
from chaintable.logger.log_types import LogEvent
from chaintable.logger.logger import log_load_event


def parse_line(line: str) -> Tuple[int, str]:
    """Split '<int key> <value...>' into (key, value); raises ValueError if malformed."""
    parts = line.strip().split(None, 1)
    if len(parts) != 2:
        raise ValueError(f"expected '<key> <value>', got {line.strip()!r}")
    return int(parts[0]), parts[1]


def load_pairs(path: str, table: HashTable) -> Tuple[int, int]:
    """
    Put every '<key> <value>' line of path into table.
    Returns (lines applied, resizes observed). Blank lines are ignored,
    malformed lines are skipped with a warning.
    """
    applied = 0
    skipped = 0
    resizes = 0
    with open(path, "r") as fin:
        for line_number, line in enumerate(fin, start=1):
            if not line.strip():
                continue
            try:
                key, value = parse_line(line)
            except ValueError as e:
                logging.warning(f"Line {line_number}: skipped ({e})")
                skipped += 1
                continue
            capacity_before = table.capacity()
            table.put(key, value)
            if table.capacity() != capacity_before:
                resizes += 1
            applied += 1

    log_load_event(LogEvent.FILE_LOADED, path, applied, skipped)
    return applied, resizes


def main(argv=None) -> int:
    logging.basicConfig(
        stream=sys.stdout,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
        force=True,
    )

    parser = argparse.ArgumentParser(
        description="Load integer-keyed pairs from a text file into a chained hash table."
    )
    parser.add_argument(
        "-i",
        "--input_file",
        required=True,
        type=str,
        help="Path to a file of '<int key> <value>' lines",
    )
    parser.add_argument(
        "-c",
        "--capacity",
        type=int,
        default=16,
        help="Initial number of buckets",
    )
    parser.add_argument(
        "-l",
        "--load_factor",
        type=float,
        default=0.75,
        help="Growth threshold in (0, 1]",
    )
    args = parser.parse_args(argv)

    try:
        table = HashTable(args.capacity, args.load_factor)
    except InvalidArgument as e:
        logging.error(f"Invalid table arguments: {e}")
        return 1

    logging.info(f"Loading {args.input_file}")
    applied, resizes = load_pairs(args.input_file, table)
    logging.info(f"Applied {applied} lines")

    print(f"size={table.size()} capacity={table.capacity()} "
          f"load_factor={table.load_factor()} resizes={resizes}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
