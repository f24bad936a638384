from setuptools import setup

setup( name = 'zerocount',
       version = '1.0.0',
       install_requires = ['decorator>=4.0'],
       extras_require = {'test' : ['numpy', 'pytest']},
       packages = ['zerocount'],
       package_dir = {'zerocount' : 'zerocount'},
       entry_points = {'console_scripts' : ['zerocount = zerocount.cli:main']},
       zip_safe = False,
       description= 'Exact count of the zeros of a rational polynomial inside and on the unit circle',
       license='GPLv2+',
       python_requires = '>=3.7',
       classifiers = [
           'Development Status :: 4 - Beta',
           'Intended Audience :: Science/Research',
           'License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)',
           'Operating System :: OS Independent',
           'Programming Language :: Python :: 3',
           'Topic :: Scientific/Engineering :: Mathematics',
        ],
)
