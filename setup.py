# setup.py
from setuptools import setup, find_packages

setup(
    name="dircraft",
    version="0.2.0",
    description="Generador de estructuras de proyecto a partir de diagramas de árbol ASCII",
    author="DirCraft contributors",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente la carpeta 'dircraft'
    package_data={
        "dircraft": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Interfaz gráfica (modo sin argumentos)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dircraft=dircraft.main:main',  # CLI y GUI comparten el mismo punto de entrada
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
