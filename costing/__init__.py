"""
Dockfinity costing: manufacturing cost and material yield for stamped-metal
packaged goods (box + cover + accessories).
"""
