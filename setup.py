from setuptools import setup, find_packages

setup(
    name="sme-insights-navigator",
    version="1.2.0",
    packages=find_packages(include=["sme_insights", "sme_insights.*"]),
    install_requires=[
        "streamlit>=1.32",
        "pandas>=2.0",
        "matplotlib>=3.7",
        "pydantic>=2.5",
        "pyyaml>=6.0",
        "psutil>=5.9"
    ],
    extras_require={
        "openai": ["openai>=1.0"],
        "gemini": ["google-generativeai>=0.5"],
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    author="SME Insights Navigator Contributors",
    description="AI-assisted business advisory with feedback-guided solution generation",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ]
)
