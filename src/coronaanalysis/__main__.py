"""Run with: python -m coronaanalysis"""
from coronaanalysis.main import main

if __name__ == "__main__":
    main()
