"""Allows running the build tool with python -m creo_build"""
from .main import main

if __name__ == "__main__":
    main()
