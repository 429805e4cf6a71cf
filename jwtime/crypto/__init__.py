"""JWS engine adapter and token types."""
