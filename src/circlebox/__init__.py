"""circlebox: solve contest bounding-box tasks against a remote JSON API."""

__version__ = "0.1.0"
