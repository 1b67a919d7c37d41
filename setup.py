#!/usr/bin/env python

from setuptools import find_packages, setup


# Use 'pip install -e .[test]' to install prerequisites for development,
# then 'python manage.py migrate' to set up the database.

setup(name="myroles-dashboard",
      version="2024.1",
      description="Dashboard block listing a user's courses grouped by role",
      long_description=open("README.rst").read(),

      author="myroles-dashboard developers",
      license="MIT",
      packages=find_packages(exclude=["tests", "tests.*"]),
      python_requires=">=3.10",
      install_requires=[
          "django>=4.2",
          "django-crispy-forms>=2.0",
          "crispy-bootstrap5>=0.7",
          ],
      extras_require={
          "test": [
              "pytest",
              "pytest-django",
              "factory_boy",
              ],
          },
      package_data={
          "dashboard": [
              "templates/*.html",
              "static/css/*.css",
              ],
          "course": [
              "templates/course/*.html",
              ],
          "myroles": [
              "templates/myroles/*.html",
              "static/myroles/*.css",
              ],
          },
      )
