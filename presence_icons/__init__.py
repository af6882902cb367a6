"""
Presence Icons - File Icon Resolution for Presence Reporting

Decides which icon best represents an open file, either from a bundled
extension/language table or from the active editor icon theme's manifest.
"""

__version__ = "1.0.0"
__author__ = "Presence Icons Contributors"
