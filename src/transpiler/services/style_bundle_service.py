# src/transpiler/services/style_bundle_service.py
from typing import List, Optional

from transpiler.model import ThemeParams

THEME_VARIABLES_TEMPLATE = """/* Manifest Design System - Variable Architecture */
:root {{
  /* HSL Base: Brand Identity */
  --m-accent-h: {hue};
  --m-accent-s: {saturation}%;
  --m-accent-l: {lightness}%;

  /* Semantic Brand Tokens */
  --manifest-accent: hsl(var(--m-accent-h), var(--m-accent-s), var(--m-accent-l));
  --manifest-accent-hover: hsl(var(--m-accent-h), var(--m-accent-s), calc(var(--m-accent-l) - 8%));
  --manifest-accent-glow: hsla(var(--m-accent-h), var(--m-accent-s), var(--m-accent-l), 0.35);

  /* Surface System */
  --manifest-bg-primary: #f8fafc;
  --manifest-bg-secondary: #eff6ff;
  --manifest-bg-tertiary: #f0fdf4;
  --manifest-bg-card: #ffffff;
  --manifest-border: #e2e8f0;

  /* Typography System */
  --manifest-text-main: #0f172a;
  --manifest-text-sub: #475569;
  --manifest-text-muted: #94a3b8;
  --manifest-text-inverse: #ffffff;

  /* Layout Geometry */
  --manifest-radius-sm: 0.375rem;
  --manifest-radius-md: 0.75rem;
  --manifest-radius-lg: 1rem;
  --manifest-radius-full: 9999px;

  /* Motion */
  --manifest-ease: cubic-bezier(0.4, 0, 0.2, 1);
  --manifest-duration: 0.2s;
  --manifest-transition: var(--manifest-duration) var(--manifest-ease);

  /* Elevation */
  --manifest-shadow-sm: 0 1px 2px 0 rgba(0, 0, 0, 0.05);
  --manifest-shadow-md: 0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06);
  --manifest-shadow-lg: 0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05);
}}"""


def theme_variables(theme: Optional[ThemeParams] = None) -> str:
    """Renders the theme-variable block with the given accent channels (or the defaults)."""
    theme = theme or ThemeParams()
    return THEME_VARIABLES_TEMPLATE.format(
        hue=theme.hue, saturation=theme.saturation, lightness=theme.lightness
    )


def build_style_bundle(
        extracted_styles: List[str], style_override: str = "", theme: Optional[ThemeParams] = None
) -> str:
    """
    Concatenates the theme block with the artifact's own styles.

    A non-empty override replaces whatever <style> text was extracted from
    the document.
    """
    if style_override and style_override.strip():
        artifact_styles = style_override.strip()
    else:
        artifact_styles = "\n".join(extracted_styles).strip()
    return f"{theme_variables(theme)}\n\n/* Artifact-specific Styles */\n{artifact_styles}"


def escape_template_literal(text: str) -> str:
    """Makes arbitrary text safe to embed between backticks."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
