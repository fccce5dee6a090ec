import setuptools

__version__ = '0.1.0'


with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='bcurve',
    version=__version__,
    license='GPL 3.0',
    description='B-spline, NURBS and Bezier curve sampling engine.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 2 - Pre-Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
    ],

    keywords=['B-spline', 'NURBS', 'Bezier', 'curve'],

    packages=['bcurve', 'bcurve.bspline', 'bcurve.bezier', 'bcurve.core'],
    package_dir={'': 'src'},

    include_package_data=True,
    zip_safe=False,
    install_requires=['numpy', 'pyyaml', 'pyyaml-include<2', 'plotly', 'matplotlib'],
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest', 'scipy'],
    },
)
