"""
Training Yard Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Test the training ground end to end against the bundled world
- mocks/: Mock implementations for testing
"""
