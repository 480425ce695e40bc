"""End-to-end tests that export mosaics and verify the written SVG."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from tilestitch.config import (
    GridShape,
    MosaicConfig,
    RenderConfig,
    StitchConfig,
    TileStitchSettings,
)
from tilestitch.core import MosaicExporter, PathTracer
from tilestitch.domain import GridCell, MosaicGrid, classic_tile, default_tiles

SVG = "{http://www.w3.org/2000/svg}"


def make_settings(**render: object) -> TileStitchSettings:
    return TileStitchSettings(
        stitch=StitchConfig(tolerance=5.0),
        mosaic=MosaicConfig(grid_size=4, seed=31337),
        render=RenderConfig(**render),
    )


def parse(path: Path) -> ET.Element:
    return ET.parse(path).getroot()


class TestCompositeExport:
    """Tests for stitched export."""

    def test_export_writes_svg(self, tmp_path: Path) -> None:
        output = tmp_path / "mosaic.svg"
        stats = MosaicExporter(make_settings(tile_size=50.0), quiet=True).export(
            default_tiles(), output_path=output
        )

        root = parse(output)
        assert root.tag == f"{SVG}svg"
        assert root.get("width") == "200"
        assert root.get("viewBox") == "0 0 200 200"
        assert len(root.findall(f"{SVG}rect")) == 16

        assert stats.output_path == output
        assert stats.seed == 31337
        assert stats.cols == 4
        assert stats.rows == 4
        assert not stats.fallback_used
        assert 0 < stats.path_count < stats.segment_count

    def test_path_elements_match_stats(self, tmp_path: Path) -> None:
        output = tmp_path / "mosaic.svg"
        stats = MosaicExporter(make_settings(), quiet=True).export(
            default_tiles(), output_path=output
        )

        paths = parse(output).findall(f"{SVG}path")
        # One background and one foreground stroke per stitched path
        assert len(paths) == 2 * stats.path_count
        assert all(p.get("stroke-linecap") == "round" for p in paths)

    def test_same_seed_same_document(self, tmp_path: Path) -> None:
        first = tmp_path / "a.svg"
        second = tmp_path / "b.svg"
        MosaicExporter(make_settings(), quiet=True).export(default_tiles(), output_path=first)
        MosaicExporter(make_settings(), quiet=True).export(default_tiles(), output_path=second)
        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    def test_given_grid(self, tmp_path: Path) -> None:
        grid = MosaicGrid.from_columns(
            [[GridCell(0), GridCell(0)], [GridCell(0), GridCell(0)]], seed=8
        )
        output = tmp_path / "classic.svg"
        stats = MosaicExporter(make_settings(), quiet=True).export(
            [classic_tile()], output_path=output, grid=grid
        )

        assert stats.seed == 8
        assert stats.segment_count == 8
        assert stats.path_count == 4
        assert stats.merged_count == 4

    def test_stale_cells_reported(self, tmp_path: Path) -> None:
        grid = MosaicGrid.from_columns([[GridCell(0), GridCell(4)]])
        stats = MosaicExporter(make_settings(), quiet=True).export(
            [classic_tile()], output_path=tmp_path / "stale.svg", grid=grid
        )
        assert stats.skipped_cells == 1
        assert stats.segment_count == 2

    def test_default_output_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        stats = MosaicExporter(make_settings(), quiet=True).export(default_tiles())
        assert stats.output_path == Path("truchet_mosaic_4x4.svg")
        assert (tmp_path / "truchet_mosaic_4x4.svg").exists()


class TestTileExport:
    """Tests for tile-by-tile export and the fallback to it."""

    def test_no_composite(self, tmp_path: Path) -> None:
        output = tmp_path / "tiles.svg"
        stats = MosaicExporter(make_settings(composite_paths=False), quiet=True).export(
            default_tiles(), output_path=output
        )

        root = parse(output)
        assert len(root.findall(f"{SVG}g")) == 16
        assert not stats.composite
        assert stats.merged_count == 0

    def test_fallback_on_render_failure(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken(self: PathTracer, tolerance: float = 5.0) -> str:
            raise RuntimeError("renderer exploded")

        monkeypatch.setattr(PathTracer, "generate_vector_markup", broken)
        output = tmp_path / "fallback.svg"
        stats = MosaicExporter(make_settings(), quiet=True).export(
            default_tiles(), output_path=output
        )

        assert stats.fallback_used
        assert len(parse(output).findall(f"{SVG}g")) == 16

    def test_horizontal_shape(self, tmp_path: Path) -> None:
        settings = make_settings()
        settings.mosaic = MosaicConfig(grid_size=4, shape=GridShape.HORIZONTAL, seed=1)
        output = tmp_path / "wide.svg"
        stats = MosaicExporter(settings, quiet=True).export(default_tiles(), output_path=output)

        assert (stats.cols, stats.rows) == (6, 4)
        assert parse(output).get("width") == "600"
