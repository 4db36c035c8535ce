import io

from PIL import Image, ImageFilter, ImageOps, ImageSequence

from docingest.logging.logger import Log

MAX_EDGE_PX = 3000


class ImagePreprocessor:
    """Cleans up an image so recognition has a better chance.

    Steps per frame: fit inside MAX_EDGE_PX without upscaling, grayscale,
    stretch contrast, sharpen. A single frame is re-encoded as PNG; a
    multi-frame scan (TIFF, GIF) keeps every frame as a multi-page TIFF so
    each page still reaches recognition. Never raises: when any step fails
    the original bytes are returned unchanged.
    """

    def __init__(self, max_edge_px: int = MAX_EDGE_PX, log: Log | None = None) -> None:
        self._max_edge_px = max_edge_px
        self._log = log or Log("imaging")

    def prepare(self, data: bytes) -> bytes:
        try:
            return self._transform(data)
        except Exception as exc:
            self._log.warning(
                f"Image optimization failed, using original: {exc}",
                original_size=len(data),
            )
            return data

    def _transform(self, data: bytes) -> bytes:
        with Image.open(io.BytesIO(data)) as img:
            frames = [self._clean(frame) for frame in ImageSequence.Iterator(img)]

        output = io.BytesIO()
        if len(frames) == 1:
            frames[0].save(output, format="PNG", optimize=True)
        else:
            frames[0].save(output, format="TIFF", save_all=True, append_images=frames[1:])
        processed = output.getvalue()
        self._log.debug(
            "Image optimized",
            original_size=len(data),
            processed_size=len(processed),
            frames=len(frames),
            dimensions=f"{frames[0].size[0]}x{frames[0].size[1]}",
        )
        return processed

    def _clean(self, frame: Image.Image) -> Image.Image:
        page = ImageOps.exif_transpose(frame.copy())
        gray = page.convert("L")
        gray.thumbnail((self._max_edge_px, self._max_edge_px), Image.Resampling.LANCZOS)
        gray = ImageOps.autocontrast(gray)
        return gray.filter(ImageFilter.SHARPEN)
