"""Draw the application icon.

The window, the About window and every alert use the same red "PDF"
document glyph. It is drawn with Pillow at startup so the app does not need
an image file next to it. Running this module writes ``pdf.png`` and
``pdf.ico`` for packaging.
"""
from PIL import Image, ImageDraw, ImageFont

PNG_NAME = "pdf.png"
ICO_NAME = "pdf.ico"
ICON_RED = (204, 0, 0)


def build_icon(size: int = 256) -> Image.Image:
    img = Image.new("RGBA", (size, size), color=(255, 255, 255, 0))
    draw = ImageDraw.Draw(img)

    margin = max(1, size // 10)
    band = max(1, size // 4)
    outline = max(1, size // 32)
    draw.rectangle([margin, margin, size - margin, size - margin],
                   fill=(255, 255, 255, 255), outline=ICON_RED, width=outline)
    draw.rectangle([margin, margin, size - margin, margin + band], fill=ICON_RED)

    try:
        font = ImageFont.truetype("arial.ttf", max(8, size // 3))
    except OSError:
        font = ImageFont.load_default()

    text = "PDF"
    bbox = draw.textbbox((0, 0), text, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    x = (size - text_width) // 2
    y = (size - text_height) // 2 + band // 2
    draw.text((x, y), text, fill=ICON_RED, font=font)
    return img


def icon_photo(size: int = 64):
    """Return the icon as a Tk image; a Tk root must already exist."""
    from PIL import ImageTk

    return ImageTk.PhotoImage(build_icon(256).resize((size, size), Image.Resampling.LANCZOS))


def save_icon_files(png_path: str = PNG_NAME, ico_path: str = ICO_NAME) -> None:
    img = build_icon(256)
    img.save(png_path)
    img.save(ico_path, format="ICO", sizes=[(256, 256), (128, 128), (64, 64), (32, 32)])


if __name__ == "__main__":
    save_icon_files()
    print(f"Generated icon: {PNG_NAME}, {ICO_NAME}")
