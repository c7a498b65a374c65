"""Command synthesis for infrastructure-as-code CLIs."""
