import logging
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from season_picker.palette.catalog import PaletteCatalog, default_catalog

logger = logging.getLogger(__name__)


# Utility functions
def _rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    """Convert an RGB tuple to a hex color code."""
    r, g, b = rgb[:3]
    return f"#{r:02X}{g:02X}{b:02X}"

def _text_size(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont):
    """Text (width, height) from the rendered bounding box."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return (right - left), (bottom - top)


# Swatch sheet for a whole catalog
class PaletteSheet:
    def __init__(
        self,
        catalog: PaletteCatalog,
        columns: int = 8,
        swatch_size: int = 80,
        gap: int = 10,
        show_labels: bool = True,
        bg_color: Tuple[int, int, int] = (255, 255, 255),
    ):
        """
        One block per palette, in catalog order: a title line (palette name
        beside a chip of its region fill color), then its reference colors
        as swatches wrapped at `columns`.

        Args:
            catalog (PaletteCatalog): Palettes to draw.
            columns (int): Swatches per row.
            swatch_size (int): Edge length of each swatch, px.
            gap (int): Spacing between swatches and blocks, px.
            show_labels (bool): Print each swatch's hex code below it.
            bg_color (Tuple[int, int, int]): Sheet background.
        """
        self.catalog = catalog
        self.columns = max(1, columns)
        self.swatch_size = swatch_size
        self.gap = gap
        self.show_labels = show_labels
        self.bg_color = bg_color

    def create_image(self) -> Image.Image:
        # --- fonts & metric ---
        font = ImageFont.load_default()
        ascent, descent = font.getmetrics()
        line_h = ascent + descent
        label_h = line_h if self.show_labels else 0

        # --- layout ---
        cell_w = self.swatch_size
        cell_h = self.swatch_size + label_h
        rows_per = {name: (len(colors) + self.columns - 1) // self.columns for name, colors in self.catalog.items()}

        width = self.gap + self.columns * (cell_w + self.gap)
        height = self.gap + sum(line_h + self.gap + r * (cell_h + self.gap) for r in rows_per.values())

        img = Image.new("RGB", (width, height), self.bg_color)
        draw = ImageDraw.Draw(img)

        y = self.gap
        for name, colors in self.catalog.items():
            # --- title + fill chip ---
            chip = self.catalog.display_color(name)
            draw.rectangle([self.gap, y, self.gap + line_h, y + line_h], fill=tuple(chip[:3]), outline=(30, 30, 30))
            draw.text((self.gap * 2 + line_h, y), name, fill=(30, 30, 30), font=font)
            y += line_h + self.gap

            # --- swatches ---
            for i, sample in enumerate(colors):
                r, c = divmod(i, self.columns)
                x0 = self.gap + c * (cell_w + self.gap)
                y0 = y + r * (cell_h + self.gap)
                x1 = x0 + cell_w
                y1 = y0 + self.swatch_size
                draw.rectangle([x0, y0, x1, y1], fill=sample.to_rgb(), outline=(220, 220, 220))

                if self.show_labels:
                    label = _rgb_to_hex(sample.to_rgb())
                    tw, th = _text_size(draw, label, font)
                    draw.text((x0 + (cell_w - tw) // 2, y1 + 2), label, fill=(30, 30, 30), font=font)
            y += rows_per[name] * (cell_h + self.gap)

        return img

    def save(self, path: str) -> str:
        img = self.create_image()
        img.save(path)
        logger.info("Palette sheet (%d palettes) saved to %s", len(self.catalog), path)
        return path


# Example usage
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    PaletteSheet(default_catalog()).save("seasonal_palettes.png")
