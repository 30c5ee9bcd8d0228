import logging
from pathlib import Path
from PIL import Image, ImageTk
from typing import Dict, Optional, Sequence


logger = logging.getLogger(__name__)

TILE_IMAGE_NAMES : Sequence[str] = ("wall", "target", "box", "box_on_target", "player")


def target_box_image_name(index : int) -> str:
    """
    Return the name of the image for a box standing on the target with the given row-major `index`.
    """
    return f"box_on_target{index + 1}"


def load_image(folder : Optional[str], name : str) -> Optional[Image.Image]:
    if folder is None:
        return None
    path = Path(folder) / f"{name}.png"
    try:
        image = Image.open(path)
        image.load()
    except OSError as e:
        logger.debug(f"Image {path} not available ({e}), using fallback shape.")
        return None
    return image

def load_tile_images(folder : Optional[str], target_count : int = 0) -> Dict[str, Image.Image]:
    """
    Load the tile images found in `folder`. Missing or unreadable images are left out of the result.
    """
    names = list(TILE_IMAGE_NAMES) + [target_box_image_name(i) for i in range(target_count)]
    images : Dict[str, Image.Image] = {}
    for name in names:
        image = load_image(folder, name)
        if image is not None:
            images[name] = image
    logger.info(f"Loaded {len(images)} of {len(names)} tile images from {folder!s}.")
    return images

def resize_image(image: Image.Image, size: int) -> ImageTk.PhotoImage:
        return ImageTk.PhotoImage(image.resize((size, size), Image.LANCZOS))
