"""jsonmin-packager: mirror a source tree with minified JSON, zip it, record its digest."""

__version__ = "0.3.0"
