"""Application composition layer for the NiceGUI desktop runtime.

The controller in this package owns the project state and the command
handlers; the page only renders the menu model and the loaded project.
"""
