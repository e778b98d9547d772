import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "base-url"
copyright = "2026, base-url contributors"
author = "base-url contributors"
import base_url

release = base_url.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_all_links_external = False
myst_enable_extensions = ["colon_fence"]

# Intersphinx mapping for external references
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Suppress warnings (cosmetic issues that don't affect documentation)
suppress_warnings = [
    "myst.xref_missing",  # External file links Sphinx can't resolve
    "ref.python",  # Duplicate cross-reference warnings from re-exports
    "ref.class",  # External class references (ada_url.URL, ipaddress)
]

# Autodoc configuration
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "init"
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "base-url"
