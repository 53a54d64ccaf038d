"""Command line demonstrations of the algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .linked_list import from_values, has_cycle, merge_two_lists, to_values


def _count(args: argparse.Namespace) -> int:
    print(" ".join(str(i) for i in range(args.n)))
    return 0


def _cycle(args: argparse.Namespace) -> int:
    head = from_values(args.values)
    if args.loop_to >= 0 and head is not None:
        nodes = []
        node = head
        while node is not None:
            nodes.append(node)
            node = node.next
        nodes[-1].next = nodes[args.loop_to]
    if has_cycle(head):
        print("Cycle detected in linked list ✅")
    else:
        print("No cycle in linked list ❌")
    return 0


def _merge(args: argparse.Namespace) -> int:
    merged = merge_two_lists(from_values(args.first), from_values(args.second))
    print("Merged List: " + " ".join(str(v) for v in to_values(merged)))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dailyalgos", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    count = commands.add_parser("count", help="print the numbers 0 .. n-1")
    count.add_argument("n", type=int, nargs="?", default=12)
    count.set_defaults(handler=_count)

    cycle = commands.add_parser("cycle", help="check a linked list for a cycle")
    cycle.add_argument("values", type=int, nargs="*", default=[1, 2, 3, 4, 5])
    cycle.add_argument(
        "--loop-to",
        type=int,
        default=1,
        help="index the last node links back to; negative for no loop",
    )
    cycle.set_defaults(handler=_cycle)

    merge = commands.add_parser("merge", help="merge two sorted linked lists")
    merge.add_argument("--first", type=int, nargs="*", default=[1, 2, 4])
    merge.add_argument("--second", type=int, nargs="*", default=[1, 3, 4])
    merge.set_defaults(handler=_merge)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "cycle" and args.loop_to >= len(args.values):
        parser.error("--loop-to must be less than the number of values")
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())