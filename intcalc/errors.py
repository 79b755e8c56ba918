ERROR_TEMPLATE = '''\
Error on line {line_num} at position {position}
{cur}
{carat}'''

TAB_WITH = 4


class ParseError(Exception):
	''' Problem with the structure of the expression '''

	def __init__(self, description, position = None):
		super().__init__(description)
		self.description = description
		self.position = position

	def __str__(self):
		if self.position is None:
			return self.description
		return '{} (at position {})'.format(self.description, self.position)


def format_error_place(string, position):
	''' Show the line containing the given position
		with a caret pointing at the failing character.
	'''
	lines = string.split('\n')
	line = 0
	while line < len(lines) - 1 and position > len(lines[line]):
		position -= len(lines[line]) + 1
		line += 1
	tabs_to_the_left = lines[line][:position].count('\t')
	return ERROR_TEMPLATE.format(
		line_num = line + 1,
		position = position + 1,
		cur = cleanup_line(lines[line]),
		carat = ' ' * (position + tabs_to_the_left * (TAB_WITH - 1)) + '^'
	)


def cleanup_line(l):
	return l.replace('\t', ' ' * TAB_WITH)
