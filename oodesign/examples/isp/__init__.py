"""Interface Segregation Principle."""
