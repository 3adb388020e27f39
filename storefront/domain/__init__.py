"""
Domain Layer

Products, the basket and the value objects they are built from.
"""
