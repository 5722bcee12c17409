from setuptools import setup


setup(name='libvirt-exporter',
      version='0.0.1',
      description='Prometheus metrics exporter for libvirt',
      long_description='',
      author='',
      author_email='',
      url='',
      license="ASL2.0",
      py_modules=[],
      packages=['libvirt_exporter', 'libvirt_exporter.app', 'libvirt_exporter.virt'],
      python_requires='>=3.6',
      install_requires=[
          'libvirt-python',
          'prometheus_client',
          'flask',
          'gevent',
      ],
      extras_require={
          'test': ['pytest', 'pytest-cov', 'webtest'],
      },
      tests_require=['pytest', 'pytest-cov', 'webtest'],
      entry_points="""
          [console_scripts]
              libvirt_exporter=libvirt_exporter.exporter:run
      """)
