# Path: scripts/__init__.py
# Purpose: Package initializer for command-line tools.
# Layer: scripts.
# Details: Lets the icon-harvest console entry point import scripts.extract_icons.
