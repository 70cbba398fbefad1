"""cartstate - shopping cart state transitions."""
