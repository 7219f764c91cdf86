from setuptools import setup, find_packages

# Read requirements.txt
def read_requirements(filename="requirements.txt"):
    with open(filename) as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]

# Read README
with open('README.md') as f:
    long_description = f.read()

setup(
    name="genai-relay",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=read_requirements(),
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-asyncio>=0.21.0',
            'httpx>=0.23.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'genai-relay=genai_relay.runner:main',
        ],
    },
    python_requires='>=3.9',
    description="A thin HTTP relay that forwards text, image, file and audio prompts to Gemini",
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
    ],
)
