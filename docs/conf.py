# -- General configuration ---------------------------------------------------
project = "portfolio-site"
extensions = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# Make the package importable for autodoc
import os, sys
HERE = os.path.abspath(os.path.dirname(__file__))          # docs
ROOT = os.path.abspath(os.path.join(HERE, ".."))           # repo root

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# -- HTML theme --------------------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]
