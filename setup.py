"""densepoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import densepoly

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='densepoly',
    version=densepoly.__version__,
    description='densepoly -- Dense univariate polynomial arithmetic in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomial', 'polynomial arithmetic', 'synthetic division', 'Horner',
              'polynomial GCD', 'squarefree decomposition', 'Chebyshev', 'Legendre',
              'Hermite', 'Bernstein', 'Lagrange interpolation'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=densepoly.__license__,
    packages=['densepoly'],
    platforms=['any'],
    install_requires=['gmpy2'],
    python_requires='>=3.9'
)
