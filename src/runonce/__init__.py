"""RunOnce: detect, highlight and run throwaway scripts.

Classifies a snippet of script text into one of a fixed set of scripting
languages, annotates it with syntax-highlighting spans, and launches it in
an external terminal through a temporary file the terminal cleans up.
"""

__version__ = "0.1.0"
