"""
Demo script for healthcare GMN check characters

Shows verification, completion and the check pair on its own, then a few
inputs that are rejected for format reasons.
"""

from gs1_gmn import (
    add_check_characters,
    check_characters,
    verify_check_characters,
    FormatError,
)
from gs1_gmn.formatters import mark_bad_positions


def show_verify(gmn):
    valid = verify_check_characters(gmn)
    status = "[OK] correct" if valid else "[!!] incorrect"
    print(f"{status} check characters: {gmn}")


def show_rejection(title, func, value, complete):
    try:
        func(value)
    except FormatError as e:
        print(f"\n{title}")
        print(f"  Input:  {value}")
        print(f"          {mark_bad_positions(value, complete)}")
        print(f"  Error:  [{e.code.value}] {e.message}")


def main():
    print("=" * 60)
    print("  Healthcare GMN check characters")
    print("=" * 60)

    # Example from the GS1 General Specifications
    partial = "1987654Ad4X4bL5ttr2310c"

    show_verify("1987654Ad4X4bL5ttr2310c2K")
    show_verify("1987654Ad4X4bL5ttr2310cZZ")

    print(f"\nPartial:  {partial}")
    print(f"Checks:   {check_characters(partial)}")
    print(f"Full GMN: {add_check_characters(partial)}")

    show_rejection("Too long", check_characters, "1987654Ad4X4bL5ttr2310cX", False)
    show_rejection("Too short", check_characters, "12345", False)
    show_rejection("Does not start with five digits", check_characters, "ABC7654Ad4X4bL5ttr2310c", False)
    show_rejection("Character outside CSET 82", check_characters, "12345£££d4X4bL5ttr2310c", False)
    show_rejection("Check character outside CSET 32", verify_check_characters, "1987654Ad4X4bL5ttr2310cxK", True)


if __name__ == "__main__":
    main()
