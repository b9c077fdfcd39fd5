"""Conversion of the UNESCO XML site list into flat records."""

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional


def parse_site_list(raw: bytes) -> List[Dict[str, Optional[str]]]:
    """Convert the UNESCO XML list into one record per site.

    Every child of the root element is a row and every child of a row is a
    column. Nested markup inside a column is flattened to its text. Columns
    missing from a row are filled with None.

    Args:
        raw: XML document.

    Returns:
        List of records with the same keys, in column order of first
        appearance.
    """
    root = ET.fromstring(raw)

    rows = []
    columns: List[str] = []
    for row in root:
        record = {}
        for field in row:
            if field.tag not in columns:
                columns.append(field.tag)
            record[field.tag] = "".join(field.itertext()).strip()
        rows.append(record)

    return [{column: row.get(column) for column in columns} for row in rows]
