"""Tests for mediainfo XML deserialization."""

import pytest

from mediameta.errors import MalformedReportError
from mediameta.models import Report, Track
from mediameta.report import parse_report


class TestParseReport:
    """Test parse_report."""

    def test_tracks_in_document_order(self, sample_xml):
        """Test every track is kept, including unknown types."""
        report = parse_report(sample_xml)
        assert [t.type for t in report.tracks] == ["General", "Video", "Audio", "Menu", "Text"]

    def test_repeated_fields_keep_all_values(self, sample_xml):
        """Test repeated elements become lists in document order."""
        video = parse_report(sample_xml).tracks_of("Video")[0]
        assert video.width == ["1920", "1 920 pixels"]
        assert video.format == ["AVC", "Legacy"]
        assert video.interlacement == ["PPF", "Progressive"]

    def test_singular_fields(self, sample_xml):
        """Test singular elements become plain strings."""
        report = parse_report(sample_xml)
        general = report.tracks_of("General")[0]
        assert general.complete_name == "/videos/sample.mp4"
        assert general.file_extension == "mp4"
        video = report.tracks_of("Video")[0]
        assert video.color_space == "YUV"
        assert video.chroma_subsampling == "4:2:0"

    def test_absent_fields(self, sample_xml):
        """Test absent fields are None or empty, never zero."""
        menu = parse_report(sample_xml).tracks_of("Menu")[0]
        assert menu.width == []
        assert menu.file_name is None

    def test_old_style_document(self):
        """Test the older <Mediainfo><File> layout without namespace."""
        raw = (
            b'<?xml version="1.0" encoding="UTF-8"?>'
            b'<Mediainfo version="0.7.64"><File>'
            b'<track type="General"><Format>Matroska</Format></track>'
            b"</File></Mediainfo>"
        )
        report = parse_report(raw)
        assert len(report.tracks) == 1
        assert report.tracks[0].format == ["Matroska"]

    def test_no_tracks(self):
        """Test a document without tracks is an empty report."""
        report = parse_report(b"<MediaInfo><media/></MediaInfo>")
        assert report.tracks == []

    def test_empty_element(self):
        """Test an empty element is an empty string value."""
        raw = b'<MediaInfo><media><track type="Video"><Width/></track></media></MediaInfo>'
        track = parse_report(raw).tracks[0]
        assert track.width == [""]

    def test_unknown_elements_ignored(self):
        """Test elements the model does not know about are dropped."""
        raw = (
            b'<MediaInfo><media><track type="General">'
            b"<Encoded_date>UTC 2020-01-01</Encoded_date>"
            b"</track></media></MediaInfo>"
        )
        track = parse_report(raw).tracks[0]
        assert track.type == "General"
        assert track.format == []

    def test_lowercase_field_name_ignored(self):
        """Test an element spelled like the Python attribute is not a field."""
        raw = (
            b'<MediaInfo><media><track type="Video">'
            b"<Format>AVC</Format><width>1920</width>"
            b"</track></media></MediaInfo>"
        )
        track = parse_report(raw).tracks[0]
        assert track.format == ["AVC"]
        assert track.width == []

    def test_invalid_track_value(self, monkeypatch):
        """Test a track the model rejects raises MalformedReportError."""
        monkeypatch.setattr("mediameta.report.REPEATED_ELEMENTS", frozenset())
        raw = b'<MediaInfo><media><track type="Video"><Width>1920</Width></track></media></MediaInfo>'
        with pytest.raises(MalformedReportError, match="Invalid <track> element"):
            parse_report(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"   \n",
            b"<MediaInfo><media><track type=\"General\"><Format>MP",
            b"not xml at all",
            b"<MediaInfo><media></MediaInfo>",
        ],
    )
    def test_malformed(self, raw):
        """Test broken output raises MalformedReportError."""
        with pytest.raises(MalformedReportError):
            parse_report(raw)

    def test_wrong_root(self):
        """Test a well-formed document that is not a MediaInfo report."""
        with pytest.raises(MalformedReportError, match="Expected a MediaInfo document"):
            parse_report(b"<html><body/></html>")


class TestTrack:
    """Test Track safe access."""

    def test_pick_first_and_second(self):
        """Test indexed access into a repeated field."""
        track = Track(type="Video", Interlacement=["Interlaced", "TFF"])
        assert track.pick("interlacement", 0) == "Interlaced"
        assert track.pick("interlacement", 1) == "TFF"

    def test_pick_out_of_range(self):
        """Test short or missing fields return None instead of raising."""
        track = Track(type="Video", Interlacement=["Interlaced"])
        assert track.pick("interlacement", 1) is None
        assert track.pick("width", 0) is None
        assert track.pick("interlacement", -1) is None

    def test_pick_singular(self):
        """Test singular fields only answer index 0."""
        track = Track(type="Video", Format_profile="High@L4")
        assert track.pick("format_profile") == "High@L4"
        assert track.pick("format_profile", 1) is None
        assert Track(type="Video").pick("format_profile") is None

    def test_tracks_of(self):
        """Test filtering tracks by type keeps order."""
        report = Report(
            tracks=[
                Track(type="Audio", Bit_rate=["128000"]),
                Track(type="Video"),
                Track(type="Audio", Bit_rate=["256000"]),
            ]
        )
        audio = report.tracks_of("Audio")
        assert [t.bit_rate for t in audio] == [["128000"], ["256000"]]
        assert report.tracks_of("Menu") == []
