class Screen:
    '''
    Text display of fixed width and height, addressed by line.
    '''

    WIDTH = 38
    HEIGHT = 10

    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.lines = [''] * height

    def write(self, line, text):
        '''
        Write text at the start of line, keeping whatever is past its end.
        '''
        text = text[:self.width]
        self.lines[line] = text + self.lines[line][len(text):]

    def dump(self):
        return [line.rstrip() for line in self.lines]
