"""Infrastructure concerns shared by the library, CLI and GraphQL surface."""
