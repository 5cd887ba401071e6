"""
Small programs that drive the MODEL layer end to end.
"""
