"""AssetDesk: desktop controller for loading and exporting asset projects."""

__version__ = "0.1.0"
