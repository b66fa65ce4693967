"""Unit tests for frame splitting and frame parsing."""

import pytest
import pytest_check as check

from src.stream.errors import FrameParseError
from src.stream.protocol import (
    DataFrame,
    EndFrame,
    FrameSplitter,
    encode_data_frame,
    encode_end_frame,
    parse_frame,
)

STREAM = 'data: {"message":"Hel"}\n\ndata: {"message":"lo"}\n\nevent: end\n\n'


def split_all(chunks: list[str]) -> list[str]:
    splitter = FrameSplitter()
    frames: list[str] = []
    for chunk in chunks:
        frames.extend(splitter.feed(chunk))
    return frames


class TestFrameSplitter:
    """Tests for rebuilding frame boundaries."""

    def test_single_chunk_yields_frames_in_order(self) -> None:
        """Whole stream in one chunk yields every frame in order."""
        assert split_all([STREAM]) == [
            'data: {"message":"Hel"}',
            'data: {"message":"lo"}',
            "event: end",
        ]

    def test_chunk_without_delimiter_yields_nothing(self) -> None:
        """Chunk with no delimiter is held back as carry-over."""
        splitter = FrameSplitter()

        check.equal(splitter.feed('data: {"mess'), [])
        check.equal(splitter.pending, 'data: {"mess')
        check.equal(splitter.feed('age":"x"}'), [])
        check.equal(splitter.pending, 'data: {"message":"x"}')

    def test_chunk_ending_on_boundary_leaves_empty_carry_over(self) -> None:
        """Chunk ending exactly on the delimiter leaves nothing pending."""
        splitter = FrameSplitter()

        assert splitter.feed("event: end\n\n") == ["event: end"]
        assert splitter.pending == ""

    def test_payload_split_mid_chunk(self) -> None:
        """Frame split inside its payload is emitted once, intact."""
        frames = split_all(['data: {"mess', 'age":"ab"}\n\n'])

        assert frames == ['data: {"message":"ab"}']
        assert parse_frame(frames[0]) == DataFrame(text="ab")

    def test_delimiter_split_across_chunks(self) -> None:
        """Delimiter whose two newlines land in different chunks still splits."""
        frames = split_all(['data: {"message":"a"}\n', '\nevent: end\n', "\n"])

        assert frames == ['data: {"message":"a"}', "event: end"]

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 16])
    def test_fixed_size_chunking_matches_whole_stream(self, size: int) -> None:
        """Any fixed chunk size yields the same frames as one big chunk."""
        chunks = [STREAM[i : i + size] for i in range(0, len(STREAM), size)]

        assert split_all(chunks) == split_all([STREAM])

    def test_every_two_way_split_matches_whole_stream(self) -> None:
        """Cutting the stream at any single point never changes the frames."""
        expected = split_all([STREAM])

        for cut in range(len(STREAM) + 1):
            assert split_all([STREAM[:cut], STREAM[cut:]]) == expected, cut

    def test_close_returns_and_clears_leftover(self) -> None:
        """close() hands back the partial frame and resets the buffer."""
        splitter = FrameSplitter()
        splitter.feed('event: end\n\ndata: {"message"')

        check.equal(splitter.close(), 'data: {"message"')
        check.equal(splitter.pending, "")
        check.equal(splitter.close(), "")

    def test_consecutive_delimiters_yield_empty_frames(self) -> None:
        """Extra blank lines surface as empty frame bodies."""
        assert split_all(["event: end\n\n\n\n"]) == ["event: end", ""]


class TestParseFrame:
    """Tests for frame classification."""

    def test_data_frame(self) -> None:
        """Data prefix with a JSON record yields its message text."""
        assert parse_frame('data: {"message": "hello"}') == DataFrame(text="hello")

    def test_data_frame_ignores_other_fields(self) -> None:
        """Unknown keys in the record are ignored."""
        frame = parse_frame('data: {"message": "x", "id": 3, "done": false}')

        assert frame == DataFrame(text="x")

    def test_data_frame_with_empty_message(self) -> None:
        """Empty message text is a valid data frame."""
        assert parse_frame('data: {"message": ""}') == DataFrame(text="")

    def test_end_frame(self) -> None:
        """Exact end marker yields an end frame."""
        assert parse_frame("event: end") == EndFrame()

    @pytest.mark.parametrize(
        "body",
        ["", "event: ping", "event: end ", ": keep-alive", 'data:{"message":"x"}'],
    )
    def test_unrecognized_bodies_are_ignored(self, body: str) -> None:
        """Bodies without a known meaning are skipped."""
        assert parse_frame(body) is None

    @pytest.mark.parametrize(
        "body",
        [
            "data: not-json",
            "data: ",
            'data: {"text": "x"}',
            'data: {"message": 5}',
            "data: null",
            'data: ["message"]',
        ],
    )
    def test_malformed_data_frames_raise(self, body: str) -> None:
        """Data frames without a valid message record raise FrameParseError."""
        with pytest.raises(FrameParseError) as exc_info:
            parse_frame(body)

        assert exc_info.value.body == body


class TestEncoding:
    """Tests for the backend-side frame encoders."""

    def test_encoded_data_frame_parses_back(self) -> None:
        """Encoded text comes back unchanged, unicode included."""
        frames = FrameSplitter().feed(encode_data_frame("héllo 👋"))

        assert [parse_frame(f) for f in frames] == [DataFrame(text="héllo 👋")]

    def test_blank_lines_in_text_do_not_break_framing(self) -> None:
        """Newlines inside text are escaped, so they never split the frame."""
        frames = FrameSplitter().feed(encode_data_frame("a\n\nb"))

        assert len(frames) == 1
        assert parse_frame(frames[0]) == DataFrame(text="a\n\nb")

    def test_end_frame_encoding(self) -> None:
        """End frame encodes as the marker plus delimiter."""
        assert encode_end_frame() == "event: end\n\n"
