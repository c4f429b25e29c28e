"""treeskel - replicate the skeleton of directory trees.

Walks source trees and mirrors their directories and empty files
relative to the current working directory, with dry-run and undo modes.
"""

__version__ = "0.1.0"
