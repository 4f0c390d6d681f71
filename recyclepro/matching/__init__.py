"""Address-to-zone matching.

Exports the public API surface used by the web layer and the CLI.
"""

from recyclepro.matching.address import ParsedAddress, normalize_street_name, parse_address
from recyclepro.matching.zones import ZoneMatch, find_all_possible_zones, find_zone, match_zone

__all__ = [
    "ParsedAddress",
    "normalize_street_name",
    "parse_address",
    "ZoneMatch",
    "find_zone",
    "find_all_possible_zones",
    "match_zone",
]
