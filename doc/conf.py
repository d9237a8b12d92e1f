import sys
import os.path

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

import diveprofile

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.todo', 'sphinx.ext.viewcode', 'sphinx.ext.mathjax'
]
project = 'diveprofile'
source_suffix = '.rst'
master_doc = 'index'

version = release = diveprofile.__version__
copyright = 'DiveProfile Team'

epub_basename = 'diveprofile - {}'.format(version)
epub_author = 'DiveProfile Team'

todo_include_todos = True

html_theme = 'sphinx_rtd_theme'

# vim: sw=4:et:ai
