"""
Only the root tests directory carries an __init__.py; the subdirectories are
namespace packages (PEP 420). Test module basenames must therefore be unique
across the whole tree.
"""
