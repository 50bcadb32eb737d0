import json
from datetime import datetime

import matplotlib.pyplot as plt

class Statistics:
    """
    Receives every broadcast from the simulation and records, as an
    independent "recorder", what an outside observer could see: where the
    car was, when its doors opened, and which calls were made.
    Collects all events in JSON Lines format for offline playback.
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.trajectory = []        # (time, floor) each time the car changes floor
        self.door_openings = []     # (time, floor, occupants)
        self.direction_changes = [] # (time, direction)
        self.steps_by_label = {}    # task label -> number of resumes

        # JSON Lines event log for offline playback
        self.event_log = []  # List of events in standardized format
        self.simulation_metadata = {}  # Metadata about the simulation

    def _add_event_log(self, event_type, event_data):
        """
        Add an event to the JSON Lines log.

        Args:
            event_type (str): Type of event (e.g., 'trace', 'doors_opened', etc.)
            event_data (dict): Event-specific data
        """
        event = {
            "time": self.env.now,
            "type": event_type,
            "data": event_data
        }
        self.event_log.append(event)

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration (num_floors, timing, etc.)
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def start_listening(self):
        """
        Main process to start intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()

            topic = data.get('topic', '')
            message = data.get('message', {})
            self.handle_message(topic, message)

    def handle_message(self, topic, message):
        """Record one broadcast. Subclasses extend this for their own topics."""
        if topic == 'simulation/trace':
            timestamp = message.get('time')
            floor = message.get('floor')
            direction = message.get('direction')
            label = message.get('task_label')

            # Record only floor changes
            if not self.trajectory or self.trajectory[-1][1] != floor:
                self.trajectory.append((timestamp, floor))
                self._add_event_log('floor_changed', {'floor': floor, 'direction': direction})
            if not self.direction_changes or self.direction_changes[-1][1] != direction:
                self.direction_changes.append((timestamp, direction))
            self.steps_by_label[label] = self.steps_by_label.get(label, 0) + 1

        elif topic == 'elevator/doors_opened':
            timestamp = message.get('timestamp')
            floor = message.get('floor')
            self.door_openings.append((timestamp, floor, message.get('occupants', 0)))
            self._add_event_log('doors_opened', {
                'floor': floor,
                'direction': message.get('direction'),
                'occupants': message.get('occupants', 0)
            })

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False):
        """Draw trajectory diagram after simulation ends

        Args:
            output_filename: PNG path, or None to skip saving
            show: If True, open an interactive window as well
        """
        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        fig = plt.figure(figsize=(14, 8))

        if self.trajectory:
            # Time in seconds on the x axis
            times = [t / 10 for t, _ in self.trajectory]
            floors = [f for _, f in self.trajectory]
            plt.step(times, floors, where='post', label='Elevator', linewidth=2.5, color='#1f77b4', alpha=0.8)

        # Door openings
        if self.door_openings:
            plt.scatter([t / 10 for t, _, _ in self.door_openings],
                        [f for _, f, _ in self.door_openings],
                        marker='s', color='#2ca02c', s=40, zorder=5, label='Doors open')

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time (s)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)

        all_floors = [floor for _, floor in self.trajectory]
        if all_floors:
            plt.yticks(range(min(all_floors), max(all_floors) + 1))

        if self.trajectory or self.door_openings:
            plt.legend(loc='upper right', fontsize=10)

        # Save to file
        if output_filename:
            plt.savefig(output_filename, dpi=150, bbox_inches='tight')
            print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)
        return output_filename

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file (default: 'simulation_log.jsonl')
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            # Write metadata as first line
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            # Write all events (already sorted by time due to sequential processing)
            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename
