import io

from PIL import Image, UnidentifiedImageError

from image_resizer.config import DEFAULT_OUTPUT_FORMAT
from image_resizer.errors import CorruptData, UnsupportedFormat

# Modes the JPEG encoder can write without conversion
JPEG_MODES = ("1", "L", "RGB", "CMYK")


def decode_image(data):
    try:
        image = Image.open(io.BytesIO(data))
    except UnidentifiedImageError as e:
        raise UnsupportedFormat(f"{e}") from e

    # Load eagerly so truncated data fails here, not halfway through the resize
    try:
        image.load()
    except (OSError, SyntaxError, ValueError) as e:
        image.close()
        raise CorruptData(f"{e}") from e

    return image


def target_size(width, height, bounds):
    """Compute the output size for a ``width`` x ``height`` source.

    Landscape sources are bound by the target width, everything else
    (square included) by the target height. The other axis is scaled by
    the same ratio and truncated, never below one pixel.
    """
    if width <= 0 or height <= 0:
        raise CorruptData(f"Invalid image dimensions {width}x{height}")

    target_width, target_height = bounds

    if width > height:
        new_width = target_width
        new_height = height * target_width // width
    else:
        new_height = target_height
        new_width = width * target_height // height

    return max(new_width, 1), max(new_height, 1)


def resize_image(image, bounds):
    size = target_size(image.width, image.height, bounds)

    # Pillow falls back to nearest neighbour for palette and bilevel images
    if image.mode == "P":
        mode = "RGBA" if "transparency" in image.info else "RGB"
        with image.convert(mode) as converted:
            return converted.resize(size, Image.BICUBIC)
    if image.mode == "1":
        with image.convert("L") as converted:
            return converted.resize(size, Image.BICUBIC)

    return image.resize(size, Image.BICUBIC)


def _flatten(image):
    # RGB copy with any alpha composited onto white
    with image.convert("RGBA") as rgba:
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
    return background


def encode_image(image, fmt=DEFAULT_OUTPUT_FORMAT, quality=None):
    fmt = fmt.upper()
    params = {} if quality is None else {"quality": quality}

    output = image
    if fmt == "JPEG" and image.mode not in JPEG_MODES:
        try:
            if image.mode in ("RGBA", "LA", "La", "RGBa", "PA"):
                output = _flatten(image)
            else:
                output = image.convert("RGB")
        except ValueError as e:
            raise UnsupportedFormat(f"Cannot convert {image.mode} image to RGB") from e

    try:
        with io.BytesIO() as buffer:
            output.save(buffer, format=fmt, **params)
            return buffer.getvalue()
    except KeyError as e:
        raise UnsupportedFormat(f"Unknown output format {fmt}") from e
    except OSError as e:
        raise UnsupportedFormat(f"Cannot encode {image.mode} image as {fmt}: {e}") from e
    finally:
        if output is not image:
            output.close()


def content_type_for(fmt):
    Image.init()
    return Image.MIME.get(fmt.upper(), "application/octet-stream")
