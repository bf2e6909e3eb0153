"""
UI package - Tk formatter window.
"""
