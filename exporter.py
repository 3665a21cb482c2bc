# exporter.py
import xml.etree.ElementTree as ET

from config import FILE_ENCODING
from records import RecordSet

XML_INDENT = "  "


def format_value(value) -> str:
    """Render a field; missing values print as None, 120.0 prints as 120."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_text(records: RecordSet, show_date: bool = False) -> str:
    """One line per flight: '[FL_DATE ]AIR_TIME DISTANCE', no trailing newline."""
    lines = []
    for r in records:
        fields = [r.air_time, r.distance]
        if show_date:
            fields.insert(0, r.fl_date)
        lines.append(" ".join(format_value(v) for v in fields))
    return "\n".join(lines)


def render_xml(records: RecordSet, show_date: bool = False) -> str:
    """Pretty-printed <flights> document; missing fields are left out."""
    root = ET.Element("flights")
    for r in records:
        flight = ET.SubElement(root, "flight")
        fields = [("air_time", r.air_time), ("distance", r.distance)]
        if show_date:
            fields.insert(0, ("date", r.fl_date))
        for tag, value in fields:
            if value is None:
                continue
            ET.SubElement(flight, tag).text = format_value(value)
    ET.indent(root, space=XML_INDENT)
    return ET.tostring(root, encoding="unicode")


def write_report(text: str, filepath: str) -> None:
    """Write the text report, replacing any existing file."""
    with open(filepath, "w", encoding=FILE_ENCODING, newline="") as f:
        f.write(text)
