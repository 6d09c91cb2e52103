from __future__ import annotations

import re

from mobilizer.tools.models import ThemeStyling

CSS_VAR_RE = re.compile(r"--[\w-]+:\s*[^;]+")
SETTINGS_REF_RE = re.compile(r"settings\.([\w-]+)")
MEDIA_WIDTH_RE = re.compile(r"@media[^{]*?\(\s*(min|max)-width\s*:\s*([^)\s]+)\s*\)", re.IGNORECASE)
STYLE_BLOCK_RE = re.compile(
    r"{%-?\s*style\s*-?%}(.*?){%-?\s*endstyle\s*-?%}|<style\b[^>]*>(.*?)</style>",
    re.IGNORECASE | re.DOTALL,
)


def _bucket_css_var(styling: ThemeStyling, prop: str, value: str) -> None:
    if "color" in prop:
        styling.colors[prop] = value
    elif "font" in prop:
        styling.fonts[prop] = value
    elif "space" in prop or "margin" in prop or "padding" in prop:
        styling.spacing[prop] = value
    elif "breakpoint" in prop:
        styling.breakpoints[prop] = value


def extract_styling(content: str) -> ThemeStyling:
    """
    Collect design tokens from raw theme text. Never raises; no matches
    yields empty maps.
    """
    styling = ThemeStyling()
    content = content or ""

    for match in CSS_VAR_RE.findall(content):
        prop, _, value = match.partition(":")
        _bucket_css_var(styling, prop.strip(), value.strip())

    # symbolic references, not resolved values
    for token in SETTINGS_REF_RE.findall(content):
        if "color" in token:
            styling.colors[token] = f"{{{{ settings.{token} }}}}"
        elif "font" in token:
            styling.fonts[token] = f"{{{{ settings.{token} }}}}"

    for bound, width in MEDIA_WIDTH_RE.findall(content):
        styling.breakpoints[f"{bound.lower()}-width: {width}"] = width

    css_blocks = []
    for liquid_css, html_css in STYLE_BLOCK_RE.findall(content):
        body = (liquid_css or html_css).strip()
        if body:
            css_blocks.append(body)
    if css_blocks:
        styling.custom_css = "\n".join(css_blocks)

    return styling
