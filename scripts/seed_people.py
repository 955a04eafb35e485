"""Seed a small demo organisation into the database."""
from roster.seed import main

if __name__ == "__main__":
    main()
