"""LastTimeI: record IoT button presses as named actions in DynamoDB."""

__version__ = "0.1.0"
