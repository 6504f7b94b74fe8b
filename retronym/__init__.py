"""
Retronym: a thoroughly modern assembler for retro consoles and computer systems.
"""
