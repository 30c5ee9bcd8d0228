import pytest

pytest.importorskip("PIL.ImageTk")

from PIL import Image

from gui.helpers import Settings
from gui.images import load_tile_images, target_box_image_name


def test_missing_images_are_left_out(tmp_path):
    Image.new("RGB", (8, 8), "gray").save(tmp_path / "wall.png")
    Image.new("RGB", (8, 8), "green").save(tmp_path / "box_on_target2.png")
    (tmp_path / "box.png").write_text("not an image")

    images = load_tile_images(str(tmp_path), target_count=2)
    assert set(images) == {"wall", "box_on_target2"}


def test_no_assets_folder():
    assert load_tile_images(None, target_count=2) == {}


def test_target_box_image_name():
    assert target_box_image_name(0) == "box_on_target1"


def test_board_offset_centers_default_level():
    assert Settings().board_offset(8, 7) == (64, 56)
