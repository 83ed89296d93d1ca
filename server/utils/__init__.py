"""
Server utilities: configuration, logging and the error taxonomy.
"""
