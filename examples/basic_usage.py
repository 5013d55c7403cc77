"""
Demo: GTIN validation, generation, normalization and prefix lookup.
"""

import gs1_gtin
from gs1_gtin import (
    GtinError,
    from_string,
    generate,
    gs1_prefix_country,
    inspect_gtin_to_json,
    normalize,
    validate,
)


def demo_basic_usage():
    """Walk through the public API."""

    print("=" * 80)
    print("  GTIN TOOLKIT DEMO")
    print("=" * 80)

    codes = [
        ("GTIN-8", "96385074"),
        ("GTIN-12 (UPC-A)", "036000291452"),
        ("GTIN-13 (EAN-13)", "6291041500213"),
        ("GTIN-13 (ISBN)", "9780306406157"),
        ("GTIN-14", "06285096000842"),
        ("Bad check digit", "6291041500214"),
        ("Bad length", "12345"),
    ]

    for title, code in codes:
        print(f"\n{title}: {code}")
        try:
            print(f"  Format:  {validate(code).label}")
            print(f"  Prefix:  {gs1_prefix_country(code)}")
        except GtinError as e:
            print(f"  Error:   [{e.code.value}] {e}")

    print("\n\n" + "=" * 80)
    print("  GENERATE / NORMALIZE")
    print("=" * 80)

    body = "629104150021"
    gtin13 = generate(body)
    print(f"\nBody:      {body}")
    print(f"GTIN-13:   {gtin13}")
    print(f"GTIN-14:   {normalize(gtin13)}")

    gtin = from_string(gtin13)
    print(f"\nValue:     {gtin!r}")
    print(f"Format:    {gs1_gtin.format(gtin).label}")

    print("\n\n" + "=" * 80)
    print("  JSON REPORT")
    print("=" * 80)
    print()
    print(inspect_gtin_to_json(gtin13))


if __name__ == "__main__":
    demo_basic_usage()
