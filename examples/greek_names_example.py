#!/usr/bin/env python
"""
Greek Names Example.

This example demonstrates the greeknames package: transliteration, gender
and case detection, declension and batch correction.
"""

from greeknames import correct_name, correct_names


def main():
    """Run the example."""
    # Basic correction
    result = correct_name("Γιάννης")
    print(f"Input: {result.original}")
    print(f"Gender: {result.gender}")
    print(f"Case: {result.current_case}")
    print(f"Confidence: {result.confidence * 100:.1f}%\n")

    # Latin to Greek transliteration
    for name in ["Giannis", "Maria", "Nikos", "Eleni", "Dimitris"]:
        result = correct_name(name)
        print(f"{name} -> {result.greek_script} ({result.gender})")
    print()

    # Case transformation
    for target_case in ["nominative", "genitive", "accusative", "vocative"]:
        result = correct_name("Γιάννης", {"targetCase": target_case})
        print(f"Γιάννης ({target_case}) -> {result.corrected}")
    print()

    # Misdeclined input is repaired before analysis
    result = correct_name("Γεώργιου")
    print(f"Γεώργιου -> {result.greek_script} ({result.current_case})\n")

    # Batch processing with invalid entries
    names = ["Μαρία", "", "Kostas", "   "]
    for name, outcome in zip(names, correct_names(names)):
        print(f"{name!r} -> {outcome.model_dump(by_alias=True)}")


if __name__ == "__main__":
    main()
