from setuptools import setup, find_packages

setup(
    name='jobcard-scraper',
    version='0.1.0',
    author='Your Name',
    author_email='your.email@example.com',
    description='Fetches one job search results page and prints the job titles on it.',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'requests',
        'beautifulsoup4',
        'flask',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'jobcard-scraper=jobcard_scraper.main:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
