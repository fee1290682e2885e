"""Adapters binding the controller ports to NiceGUI, the filesystem and JSON files."""
