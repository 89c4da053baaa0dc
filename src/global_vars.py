QUEUE_CAPACITY = 5
INPUT_BUFFER = 64

piece_kinds = ('I', 'O', 'T', 'L')
