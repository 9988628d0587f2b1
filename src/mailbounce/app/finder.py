# Copyright (C) 2012-2026 by the mailbounce developers.
#
# This file is part of mailbounce.
#
# mailbounce is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# mailbounce is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# mailbounce.  If not, see <http://www.gnu.org/licenses/>.

"""Find various kinds of object in package space."""

__all__ = [
    'find_components',
    'scan_module',
    ]


import os

from importlib import import_module
from importlib.resources import files



def scan_module(module, interface):
    """Return all the items in a module that conform to an interface.

    :param module: A module object.  The module's `__all__` will be scanned.
    :type module: module
    :param interface: The interface that returned objects must conform to.
    :type interface: `Interface`
    :return: The sequence of matching components.
    :rtype: objects implementing `interface`
    """
    missing = object()
    for name in module.__all__:
        component = getattr(module, name, missing)
        assert component is not missing, (
            '{0} has bad __all__: {1}'.format(module, name))
        if interface.implementedBy(component):
            yield component


def find_components(package, interface):
    """Find components which conform to a given interface.

    Search all the modules in a given package, returning an iterator over all
    objects found that conform to the given interface.

    :param package: The package path to search.
    :type package: string
    :param interface: The interface that returned objects must conform to.
    :type interface: `Interface`
    :return: The sequence of matching components.
    :rtype: objects implementing `interface`
    """
    for resource in sorted(files(package).iterdir(), key=lambda r: r.name):
        basename, extension = os.path.splitext(resource.name)
        if extension != '.py' or basename == '__init__':
            continue
        module = import_module('{0}.{1}'.format(package, basename))
        if not hasattr(module, '__all__'):
            continue
        for component in scan_module(module, interface):
            yield component
