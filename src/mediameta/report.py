"""Deserialize mediainfo XML output into a Report."""

from lxml import etree
from pydantic import ValidationError

from mediameta.errors import MalformedReportError
from mediameta.models import REPEATED_ELEMENTS, Report, Track

# Root element names used by the different mediainfo XML generations
ROOT_ELEMENTS = ("MediaInfo", "Mediainfo")

# Elements that hold the <track> list ("media" in current releases, "File" in old ones)
TRACK_CONTAINERS = ("media", "File")


def _local_name(element: etree._Element) -> str:
    """Return the tag name without namespace."""
    return etree.QName(element).localname


def _parse_track(element: etree._Element) -> Track:
    """Collect the child elements of a <track> into a Track."""
    values: dict[str, list[str]] = {}
    for child in element:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue
        values.setdefault(_local_name(child), []).append(child.text or "")

    data: dict[str, object] = {}
    for name, found in values.items():
        data[name] = found if name in REPEATED_ELEMENTS else found[0]
    data["type"] = element.get("type", "")
    try:
        return Track.model_validate(data)
    except ValidationError as e:
        raise MalformedReportError(f"Invalid <track> element: {e}") from e


def parse_report(raw: bytes) -> Report:
    """Parse the output of ``mediainfo --Output=XML``.

    Args:
        raw: Raw bytes captured from mediainfo's stdout

    Returns:
        Report with every track in document order

    Raises:
        MalformedReportError: If the bytes are not a well-formed
            MediaInfo XML document
    """
    # Configure XML parser to drop blank text and never fetch anything
    parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False, no_network=True)
    if not raw.strip():
        raise MalformedReportError("Empty mediainfo output")
    try:
        root = etree.fromstring(raw, parser=parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedReportError(f"Invalid mediainfo XML: {e}") from e

    if root is None or _local_name(root) not in ROOT_ELEMENTS:
        found = _local_name(root) if root is not None else "nothing"
        raise MalformedReportError(f"Expected a MediaInfo document, got <{found}>")

    tracks = []
    for container in root:
        if not isinstance(container.tag, str) or _local_name(container) not in TRACK_CONTAINERS:
            continue
        for element in container:
            if isinstance(element.tag, str) and _local_name(element) == "track":
                tracks.append(_parse_track(element))

    return Report(tracks=tracks)
