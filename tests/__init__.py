"""
Root tests package.

Only this directory carries an __init__.py. Subdirectories are plain
namespace packages (PEP 420), so test module basenames must stay unique.
"""
