"""Commands (write operations) and their handlers."""
