"""Logger setup shared by the loader, projections and the Streamlit app."""
import logging
import os
from datetime import datetime

def setup_logger(name):
    """
    Console logger at INFO plus a dated DEBUG file under logs/.
    Handlers are attached once, so Streamlit reruns reuse the same logger.

    Parameters
    name (str) : Name of the logger

    Returns:
    logging.Logger : Configured Logger Instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    os.makedirs('logs', exist_ok=True)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # --- FILE ---
    file_handler = logging.FileHandler(f'logs/crime_explorer_{datetime.now():%Y%m%d}.log')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(levelname)s : %(name)s : %(funcName)s : %(lineno)d : %(message)s'
    ))

    # --- CONSOLE ---
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger
