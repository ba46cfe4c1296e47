"""Qt user interface for toxgui."""
