"""Extract gallery embeds from markdown notes and answer multi-field queries over them."""

__version__ = "0.1.0"
