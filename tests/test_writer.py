from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from threading import Barrier

import pytest
from PIL import Image

from core.icons.writer import IconWriter, build_base_name, make_safe_file_name
from tests.helpers import make_icon


def test_base_name_strips_extension_and_appends_size() -> None:
    assert build_base_name(Path("/apps/Notepad.exe"), (32, 32)) == "Notepad_32x32"
    assert build_base_name("C:/x/archive.tar.ico", (16, 16)) == "archive.tar_16x16"


def test_base_name_is_deterministic() -> None:
    assert build_base_name("a/b/tool.dll", (48, 48)) == build_base_name("a/b/tool.dll", (48, 48))


def test_invalid_characters_are_replaced() -> None:
    assert make_safe_file_name('a<b>c:d"e|f?g*h\x01') == "a_b_c_d_e_f_g_h_"
    assert make_safe_file_name("plain-name.v2") == "plain-name.v2"


def test_save_writes_png_into_size_bucket(tmp_path: Path) -> None:
    writer = IconWriter(tmp_path / "out")

    destination = writer.save(make_icon((64, 64)), "app_64x64")

    assert destination == tmp_path / "out" / "64x64" / "app_64x64.png"
    with Image.open(destination) as saved:
        assert saved.format == "PNG"
        assert saved.size == (64, 64)


def test_name_collision_gets_numeric_suffix(tmp_path: Path) -> None:
    writer = IconWriter(tmp_path)
    first = make_icon((32, 32))
    second = make_icon((32, 32), accent=(0, 200, 0, 255))
    third = make_icon((32, 32), accent=(0, 0, 0, 255))

    paths = [writer.save(image, "tool_32x32") for image in (first, second, third)]

    assert [path.name for path in paths] == ["tool_32x32.png", "tool_32x32_1.png", "tool_32x32_2.png"]
    with Image.open(paths[0]) as saved:
        assert saved.convert("RGBA").tobytes() == first.tobytes()


def test_exclusive_create_never_overwrites(tmp_path: Path, monkeypatch) -> None:
    writer = IconWriter(tmp_path)
    existing = writer.save(make_icon((16, 16)), "dup_16x16")
    original = existing.read_bytes()
    # Simulate another worker creating the file between the check and the open.
    monkeypatch.setattr(writer, "resolve_path", lambda directory, base_name: existing)

    with pytest.raises(FileExistsError):
        writer.save(make_icon((16, 16), accent=(0, 0, 0, 255)), "dup_16x16")

    assert existing.read_bytes() == original


def test_serialized_names_survive_concurrent_saves(tmp_path: Path) -> None:
    writer = IconWriter(tmp_path, serialize_names=True)
    workers = 8
    barrier = Barrier(workers)
    images = [make_icon((16, 16), accent=(index * 20, 0, 0, 255)) for index in range(workers)]

    def save(index: int) -> Path:
        barrier.wait()
        return writer.save(images[index], "shared_16x16")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        paths = list(executor.map(save, range(workers)))

    assert len(set(paths)) == workers
    assert len(list((tmp_path / "16x16").iterdir())) == workers


def test_bucket_uses_actual_bitmap_dimensions(tmp_path: Path) -> None:
    writer = IconWriter(tmp_path)

    destination = writer.save(make_icon((10, 12)), "odd_10x12")

    assert destination.parent.name == "10x12"
