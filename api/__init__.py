"""HTTP service exposing read-aloud assessment."""
