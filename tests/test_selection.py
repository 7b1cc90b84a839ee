"""Tests for menu input classification and resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from loxselect.core.models import Catalog, InstallationRecord
from loxselect.core.version import normalize
from loxselect.selection import (
    Configure,
    Invalid,
    Latest,
    Quit,
    SelectOrdinal,
    classify_selection,
    resolve_selection,
)


def _catalog(*versions: str) -> Catalog:
    records = []
    for idx, version in enumerate(versions, start=1):
        install = Path("/opt/Loxone") / f"LoxoneConfig{idx}"
        records.append(InstallationRecord(
            folder_name=install.name,
            version_display=version,
            version_tuple=normalize(version),
            install_path=install,
            executable_path=install / "LoxoneConfig.exe",
            ordinal=idx,
        ))
    return Catalog(records=tuple(records))


class TestClassify:
    """Every input maps to exactly one variant."""

    @pytest.mark.parametrize("raw", ["", "   ", "\t", None])
    def test_empty_is_latest(self, raw: str | None) -> None:
        assert classify_selection(raw, 3) == Latest()

    @pytest.mark.parametrize("size", [1, 2, 10])
    def test_empty_latest_any_size(self, size: int) -> None:
        assert classify_selection("", size) == Latest()

    def test_empty_with_empty_catalog_is_invalid(self) -> None:
        assert isinstance(classify_selection("", 0), Invalid)

    @pytest.mark.parametrize("raw", ["q", "Q", "quit", "EXIT", " q "])
    def test_quit(self, raw: str) -> None:
        assert classify_selection(raw, 2) == Quit()

    @pytest.mark.parametrize("raw", ["c", "C", "config", "p", "Path"])
    def test_configure(self, raw: str) -> None:
        assert classify_selection(raw, 2) == Configure()

    def test_quit_and_configure_with_empty_catalog(self) -> None:
        assert classify_selection("q", 0) == Quit()
        assert classify_selection("c", 0) == Configure()

    def test_ordinal(self) -> None:
        assert classify_selection("2", 3) == SelectOrdinal(2)
        assert classify_selection(" 1 ", 3) == SelectOrdinal(1)

    @pytest.mark.parametrize("raw", ["0", "4", "-1", "1.5", "abc", "²", "1 2"])
    def test_invalid(self, raw: str) -> None:
        result = classify_selection(raw, 3)
        assert isinstance(result, Invalid)


class TestResolve:
    """Launching variants map to catalog records."""

    def test_latest_is_ordinal_one(self) -> None:
        catalog = _catalog("16.0.6.10", "15.5.3.4")
        assert resolve_selection(Latest(), catalog).ordinal == 1

    def test_ordinal(self) -> None:
        catalog = _catalog("16.0.6.10", "15.5.3.4")
        assert resolve_selection(SelectOrdinal(2), catalog).version_display == "15.5.3.4"

    @pytest.mark.parametrize("selection", [Quit(), Configure(), Invalid("x")])
    def test_non_launching(self, selection) -> None:
        assert resolve_selection(selection, _catalog("16.0")) is None

    def test_latest_on_empty_catalog(self) -> None:
        assert resolve_selection(Latest(), Catalog()) is None
