"""Guest Reviews management CLI.

Operator commands for moderating reviews and checking the review source
without going through the HTTP API. Uses the same adapters and settings
as the web application.

Usage:
    python src/manage.py approve hostaway-7453      # Show a review publicly
    python src/manage.py unapprove hostaway-7453    # Hide it again
    python src/manage.py list-approvals             # Print the approval mapping
    python src/manage.py check-source               # Validate the raw review file
"""

import argparse
import json
import sys


def set_flag(review_id, approved):
    """Set the approval flag for one review."""
    from reviews.approvals import get_approval_store
    from reviews.exceptions import InvalidArgument, PersistenceFailure
    from reviews.review.approval import set_approval

    try:
        result = set_approval(review_id, approved, get_approval_store())
    except (InvalidArgument, PersistenceFailure) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    state = "approved" if result.approved else "unapproved"
    print(f"{result.id} {state}.")
    return 0


def list_approvals():
    """Print the stored approval mapping as JSON."""
    from reviews.approvals import get_approval_store
    from reviews.review.query import load_approvals

    print(json.dumps(load_approvals(get_approval_store()), indent=2, sort_keys=True))
    return 0


def check_source():
    """Load and normalize the raw source, then summarize it per listing."""
    from reviews.approvals import get_approval_store
    from reviews.exceptions import SourceUnavailable
    from reviews.review.query import build_result, load_approvals
    from reviews.source import get_review_source

    source = get_review_source()
    try:
        raw_records = source.load()
    except SourceUnavailable as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = build_result(raw_records, load_approvals(get_approval_store()), source_name=source.name)
    print(f"{result.count} reviews from {source.name}.")
    for name, group in result.by_listing.items():
        average = f"{group.average_rating:.2f}" if group.average_rating is not None else "n/a"
        approved = sum(1 for review in group.reviews if review.approved)
        print(f"  {name}: {len(group.reviews)} reviews, average {average}, {approved} approved")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Guest Reviews management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    approve_parser = subparsers.add_parser("approve", help="Mark a review as publicly shown")
    approve_parser.add_argument("review_id", help="Canonical review id, e.g. hostaway-7453")

    unapprove_parser = subparsers.add_parser("unapprove", help="Hide a review from public display")
    unapprove_parser.add_argument("review_id", help="Canonical review id, e.g. hostaway-7453")

    subparsers.add_parser("list-approvals", help="Print the current approval mapping")
    subparsers.add_parser("check-source", help="Validate and summarize the raw review source")

    args = parser.parse_args(argv)

    from reviews.utils.logging import configure_logging

    configure_logging(stream=sys.stderr)

    if args.command == "approve":
        return set_flag(args.review_id, True)
    elif args.command == "unapprove":
        return set_flag(args.review_id, False)
    elif args.command == "list-approvals":
        return list_approvals()
    elif args.command == "check-source":
        return check_source()

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
