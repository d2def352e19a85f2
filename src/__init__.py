"""
Restaurant core: menu catalog and order summary domain services.
"""
