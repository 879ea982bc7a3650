"""Tools for RPG Maker 2000/2003 game folders: PO catalogues, map teleport graphs and JSON directory caches."""

__version__ = "0.1.0"