# pdfmerger/about.py

from datetime import date
from typing import Optional

__VERSION__ = "1.0.0"

APP_TITLE = "Simple PDF Merger"

MIT_LICENSE = """\
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE."""


def about_text(year: Optional[int] = None) -> str:
    """Static text for the About window."""
    if year is None:
        year = date.today().year
    return (
        f"{APP_TITLE}\n"
        f"Version: {__VERSION__}\n"
        "\n"
        f"Copyright © {year} Dustin K. Redmond <dustin@dustinredmond.com>\n"
        "\n"
        f"{MIT_LICENSE}"
    )
