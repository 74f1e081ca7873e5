"""
Galaxy Adventure styles.
"""
