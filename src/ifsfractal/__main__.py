"""
Run with: python -m ifsfractal
"""
from ifsfractal.main import main

if __name__ == "__main__":
    main()
