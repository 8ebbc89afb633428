"""Mock factories shared by the test modules."""
