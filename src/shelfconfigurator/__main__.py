"""Run with: python -m shelfconfigurator"""
from shelfconfigurator.main import main

if __name__ == "__main__":
    main()
