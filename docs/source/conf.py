# docs/source/conf.py
import os
import sys

# Make the package importable for autodoc
sys.path.insert(0, os.path.abspath("../../src"))

project = "solid-demos"
author = "The solid-demos contributors"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "myst_parser",
]
autodoc_default_options = {
    "members": True,
    "undoc-members": True,
}

html_theme = "furo"
html_title = "SOLID demos"
