import simpy

class MessageBroker:
    """
    Carries trace and lifecycle events out of the simulation.
    Implements a topic-based publish-subscribe model on simpy Stores.

    Every message lands on the broadcast pipe; topic pipes are created on
    first subscription and only receive messages published after that.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = False):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every published message
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # Dictionary to hold Store for each topic
        self.broadcast_pipe = simpy.Store(self.env)

    def get_pipe(self, topic: str) -> simpy.Store:
        """
        Get or create a communication pipe (Store) for the specified topic
        """
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message):
        """
        Publish (put) a message to the broadcast pipe and the topic's subscribers
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        pipe = self.topics.get(topic)
        if pipe is not None:
            return pipe.put(message)
        return None

    def get(self, topic: str):
        """
        Wait to receive (get) a message from the specified topic
        """
        pipe = self.get_pipe(topic)
        return pipe.get()

    def get_broadcast_pipe(self) -> simpy.Store:
        """
        Method for Statistics class to access this pipe
        Returns the global broadcast pipe
        """
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """
        Get current simpy time (equal to simulated ticks under SimpyDriver)
        """
        return self.env.now
