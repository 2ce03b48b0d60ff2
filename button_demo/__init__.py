"""Two-button demo application for the cellui button widget."""
