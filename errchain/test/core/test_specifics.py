"""Tests for errchain.core.specifics module."""

from __future__ import annotations

from pathlib import Path

import pytest

from errchain.core.specifics import (
    MAX_BUFFER_SIZE,
    ContextInitError,
    InvalidArgument,
    IoctlError,
    IoctlResultTooLarge,
    MetadataIoError,
)


class TestMessages:
    def test_context_init(self) -> None:
        assert str(ContextInitError()) == "DM context not initialized"

    def test_invalid_argument(self) -> None:
        assert str(InvalidArgument("32")) == "invalid argument: 32"

    def test_ioctl_error(self) -> None:
        assert str(IoctlError("dm-3")) == "ioctl error, device info: dm-3"

    def test_result_too_large(self) -> None:
        assert str(IoctlResultTooLarge()) == (
            "ioctl result too large for maximum buffer size 4294967295 bytes"
        )

    def test_metadata_io(self) -> None:
        path = Path("/dev/mapper/vg-root")
        assert str(MetadataIoError(path)) == "failed to stat metadata for device at /dev/mapper/vg-root"

    def test_messages_are_single_line(self) -> None:
        variants = [
            ContextInitError(),
            InvalidArgument("x"),
            IoctlError("dm-0"),
            IoctlResultTooLarge(),
            MetadataIoError(Path("/tmp")),
        ]
        for variant in variants:
            assert "\n" not in str(variant)


class TestEquality:
    def test_same_variant_same_data(self) -> None:
        assert InvalidArgument("32") == InvalidArgument("32")
        assert ContextInitError() == ContextInitError()

    def test_same_variant_different_data(self) -> None:
        assert InvalidArgument("32") != InvalidArgument("33")

    def test_different_variants(self) -> None:
        assert ContextInitError() != IoctlResultTooLarge()

    def test_hashable(self) -> None:
        assert len({InvalidArgument("a"), InvalidArgument("a"), ContextInitError()}) == 2

    def test_frozen(self) -> None:
        arg = InvalidArgument("32")
        with pytest.raises(AttributeError):
            arg.description = "33"  # type: ignore[misc]


def test_max_buffer_size_is_u32_max() -> None:
    assert MAX_BUFFER_SIZE == 4294967295
