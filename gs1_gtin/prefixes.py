"""
GS1 Prefix Table

Maps the leading 2 or 3 digits of a GTIN to the GS1 Member Organization
(or special allocation such as ISBN/ISSN) that issued it.

Lookup rule: the 3-digit prefix is tried first, then the 2-digit prefix.
Narrow allocations therefore win over any broader block they sit in
(e.g. 978 resolves to ISBN whatever 97 might map to).

Reference: https://www.gs1.org/standards/id-keys/company-prefix
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .core.digits import NUMERIC


logger = logging.getLogger(__name__)

PREFIX_WIDTHS = (3, 2)


@dataclass(frozen=True)
class PrefixEntry:
    """A single GS1 prefix allocation."""
    prefix: str
    name: str


# GS1 prefix allocations. Ranges are inclusive and expanded into one key per
# prefix of the same width when the table is built.
RAW_PREFIX_TABLE = """
# Prefix  Organization
00-01     GS1 US
02        Restricted distribution (MO defined)
03        GS1 US
04        Restricted distribution (company internal)
05        GS1 US coupons
06-13     GS1 US
20-29     Restricted distribution (MO defined)
30-37     GS1 France
380       GS1 Bulgaria
383       GS1 Slovenija
385       GS1 Croatia
387       GS1 BIH (Bosnia-Herzegovina)
389       GS1 Montenegro
390       GS1 Kosovo
40-43     GS1 Germany
440       GS1 Germany
45        GS1 Japan
46        GS1 Russia
470       GS1 Kyrgyzstan
471       GS1 Taiwan
474       GS1 Estonia
475       GS1 Latvia
476       GS1 Azerbaijan
477       GS1 Lithuania
478       GS1 Uzbekistan
479       GS1 Sri Lanka
480       GS1 Philippines
481       GS1 Belarus
482       GS1 Ukraine
483       GS1 Turkmenistan
484       GS1 Moldova
485       GS1 Armenia
486       GS1 Georgia
487       GS1 Kazakstan
488       GS1 Tajikistan
489       GS1 Hong Kong, China
49        GS1 Japan
50        GS1 UK
520-521   GS1 Association Greece
528       GS1 Lebanon
529       GS1 Cyprus
530       GS1 Albania
531       GS1 North Macedonia
535       GS1 Malta
539       GS1 Ireland
54        GS1 Belgium & Luxembourg
560       GS1 Portugal
569       GS1 Iceland
57        GS1 Denmark
590       GS1 Poland
594       GS1 Romania
599       GS1 Hungary
600-601   GS1 South Africa
603       GS1 Ghana
604       GS1 Senegal
608       GS1 Bahrain
609       GS1 Mauritius
611       GS1 Morocco
613       GS1 Algeria
615       GS1 Nigeria
616       GS1 Kenya
617       GS1 Cameroon
618       GS1 Cote d'Ivoire
619       GS1 Tunisia
620       GS1 Tanzania
621       GS1 Syria
622       GS1 Egypt
623       GS1 Brunei
624       GS1 Libya
625       GS1 Jordan
626       GS1 Iran
627       GS1 Kuwait
628       GS1 Saudi Arabia
629       GS1 Emirates
630       GS1 Qatar
631       GS1 Namibia
64        GS1 Finland
680-681   GS1 China
69        GS1 China
70        GS1 Norway
729       GS1 Israel
73        GS1 Sweden
740       GS1 Guatemala
741       GS1 El Salvador
742       GS1 Honduras
743       GS1 Nicaragua
744       GS1 Costa Rica
745       GS1 Panama
746       GS1 Republica Dominicana
750       GS1 Mexico
754-755   GS1 Canada
759       GS1 Venezuela
76        GS1 Schweiz, Suisse, Svizzera
770-771   GS1 Colombia
773       GS1 Uruguay
775       GS1 Peru
777       GS1 Bolivia
778-779   GS1 Argentina
780       GS1 Chile
784       GS1 Paraguay
786       GS1 Ecuador
789-790   GS1 Brasil
80-83     GS1 Italy
84        GS1 Spain
850       GS1 Cuba
858       GS1 Slovakia
859       GS1 Czech
860       GS1 Serbia
865       GS1 Mongolia
867       GS1 North Korea
868-869   GS1 Turkey
87        GS1 Netherlands
880       GS1 Korea
883       GS1 Myanmar
884       GS1 Cambodia
885       GS1 Thailand
888       GS1 Singapore
890       GS1 India
893       GS1 Vietnam
896       GS1 Pakistan
899       GS1 Indonesia
90-91     GS1 Austria
93        GS1 Australia
94        GS1 New Zealand
950       GS1 Global Office
951       GS1 Global Office (EPC General Manager Numbers)
952       GS1 Global Office (demonstrations and examples)
955       GS1 Malaysia
958       GS1 Macau, China
96        GS1 Global Office (GTIN-8)
977       ISSN
978-979   ISBN
980       Refund receipts
981-984   GS1 coupon identification for common currency areas
"""


def _expand_prefix_spec(spec: str) -> List[str]:
    """
    Expand a prefix or inclusive prefix range into literal prefixes.

    Examples:
        "03" -> ["03"]
        "30-32" -> ["30", "31", "32"]
        "978-979" -> ["978", "979"]
    """
    if '-' in spec:
        start, end = spec.split('-', 1)
    else:
        start = end = spec

    if len(start) != len(end):
        raise ValueError(f"Mixed-width prefix range: {spec}")
    if len(start) not in PREFIX_WIDTHS:
        raise ValueError(f"Prefix must be 2 or 3 digits: {spec}")
    if not all(c in NUMERIC for c in start + end):
        raise ValueError(f"Prefix must be numeric: {spec}")
    if int(start) > int(end):
        raise ValueError(f"Reversed prefix range: {spec}")

    width = len(start)
    return [str(n).zfill(width) for n in range(int(start), int(end) + 1)]


def _parse_raw_table(raw: str) -> List[PrefixEntry]:
    """Parse a raw prefix table into one PrefixEntry per literal prefix."""
    entries = []

    for line in raw.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        parts = line.split(None, 1)
        if len(parts) < 2:
            raise ValueError(f"Prefix row without organization name: {line!r}")

        spec, name = parts[0], parts[1].strip()
        for prefix in _expand_prefix_spec(spec):
            entries.append(PrefixEntry(prefix=prefix, name=name))

    return entries


class PrefixTable:
    """
    Exact-string keyed GS1 prefix table.
    """

    def __init__(self, entries: Optional[Iterable[PrefixEntry]] = None):
        self._entries: Dict[str, str] = {}

        if entries:
            for entry in entries:
                self._add(entry)

    def _add(self, entry: PrefixEntry) -> None:
        if len(entry.prefix) not in PREFIX_WIDTHS:
            raise ValueError(f"Prefix must be 2 or 3 digits: {entry.prefix}")
        if entry.prefix in self._entries:
            raise ValueError(f"Duplicate GS1 prefix: {entry.prefix}")
        self._entries[entry.prefix] = entry.name

    def get(self, prefix: str) -> Optional[str]:
        """Get organization name by exact prefix."""
        return self._entries.get(prefix)

    def lookup(self, code: str) -> Optional[str]:
        """
        Resolve the organization for a code from its leading characters.

        The code is used as given (no trimming or validation). The 3-character
        candidate is checked before the 2-character one; candidates longer than
        the code are skipped.

        Returns:
            Organization name, or None if no prefix matches.
        """
        for width in PREFIX_WIDTHS:
            if len(code) < width:
                continue
            name = self._entries.get(code[:width])
            if name is not None:
                return name
        return None

    def __contains__(self, prefix: str) -> bool:
        return prefix in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def all_entries(self) -> Dict[str, str]:
        """Return all prefix -> name entries."""
        return self._entries.copy()

    @classmethod
    def from_raw(cls, raw: str) -> 'PrefixTable':
        """Build a table from text in the RAW_PREFIX_TABLE layout."""
        return cls(_parse_raw_table(raw))


# Global cached table instance
_cached_table: Optional[PrefixTable] = None


def load_prefix_table(force_reload: bool = False) -> PrefixTable:
    """
    Load the GS1 prefix table, using cache when possible.

    Args:
        force_reload: Rebuild from RAW_PREFIX_TABLE even if cached.

    Returns:
        PrefixTable shared by all callers; do not mutate.
    """
    global _cached_table

    if _cached_table is not None and not force_reload:
        return _cached_table

    _cached_table = PrefixTable.from_raw(RAW_PREFIX_TABLE)
    logger.debug("Loaded %d GS1 prefix entries", len(_cached_table))
    return _cached_table


def lookup_gs1_prefix(code: str) -> Optional[str]:
    """
    Look up the GS1 organization for a code in the default table.

    Args:
        code: Raw code text; only its first 3 and 2 characters are used.

    Returns:
        Organization name, or None if no prefix matches.
    """
    return load_prefix_table().lookup(code)
