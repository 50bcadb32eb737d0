import numpy as np

from .statistics import Statistics


def _tenths(ticks):
    """Format ticks as seconds with one decimal, e.g. 152 -> '15.2'."""
    return f"{ticks // 10}.{ticks % 10}"


class SimulationStatistics(Statistics):
    """
    Simulator-only statistics with "God's view" access.

    Features:
    - Per-passenger journey records keyed by passenger number
    - Queue wait, riding time, occupancy and stops for every trip
    - Counts of arrivals, give-ups and completed trips

    Use cases:
    - Algorithm comparison (boarding policies, timing tables)
    - Regression runs against the worked example
    """
    def __init__(self, env, broadcast_pipe, verbose=False):
        super().__init__(env, broadcast_pipe)
        self.verbose = verbose

        # God's view data (simulation-only)
        self.passengers = {}  # passenger number -> journey record
        self.arrivals = 0
        self.gave_up = 0
        self.completed = 0

    def handle_message(self, topic, message):
        super().handle_message(topic, message)

        if topic == 'passenger/arrived':
            number = message['passenger']
            self.arrivals += 1
            self.passengers[number] = {
                'origin': message['origin'],
                'destination': message['destination'],
                'patience': message['patience'],
                'arrived_at': message['timestamp'],
                'outcome': 'waiting',
            }
            self._add_event_log('passenger_arrived', message)

        elif topic == 'passenger/gave_up':
            number = message['passenger']
            self.gave_up += 1
            record = self.passengers.setdefault(number, {})
            record.update({'outcome': 'gave_up', 'waited': message['waited']})
            self._add_event_log('passenger_gave_up', message)
            if self.verbose:
                print(f"User {number} walked after {_tenths(message['waited'])}s "
                      f"waiting in the queue on floor {message['floor']}")

        elif topic == 'passenger/boarded':
            number = message['passenger']
            record = self.passengers.setdefault(number, {})
            record.update({'outcome': 'riding', 'boarded_at': message['timestamp']})
            self._add_event_log('passenger_boarded', message)

        elif topic == 'passenger/alighted':
            number = message['passenger']
            self.completed += 1
            record = self.passengers.setdefault(number, {})
            record.update({
                'outcome': 'arrived',
                'alighted_at': message['timestamp'],
                'queue_wait': message['queue_wait'],
                'ride': message['ride'],
                'max_occupancy': message['max_occupancy'],
                'stopped_at': message['stopped_at'],
            })
            self._add_event_log('passenger_alighted', message)
            if self.verbose:
                stops = " ".join(str(f) for f in message['stopped_at'])
                print(f"User {number} arrived after {_tenths(message['queue_wait'])}s waiting in the queue "
                      f"on floor {message['origin']} followed by {_tenths(message['ride'])}s in the elevator. "
                      f"Max occupancy {message['max_occupancy']}. Stopped at floors {stops}.")

    def _metric(self, key):
        return [r[key] for r in self.passengers.values() if r.get('outcome') == 'arrived' and key in r]

    def summary(self):
        """
        Aggregate metrics in ticks.

        Returns:
            dict with counts and mean / p95 / max for queue wait, ride and total journey time
        """
        result = {
            'arrivals': self.arrivals,
            'gave_up': self.gave_up,
            'completed': self.completed,
            'door_openings': len(self.door_openings),
        }
        waits = self._metric('queue_wait')
        rides = self._metric('ride')
        totals = [w + r for w, r in zip(waits, rides)]
        for name, values in (('queue_wait', waits), ('ride', rides), ('journey', totals)):
            if values:
                data = np.asarray(values, dtype=float)
                result[name] = {
                    'mean': float(np.mean(data)),
                    'p95': float(np.percentile(data, 95)),
                    'max': float(np.max(data)),
                }
            else:
                result[name] = {'mean': 0.0, 'p95': 0.0, 'max': 0.0}
        return result

    def print_passenger_metrics_summary(self):
        """
        Print detailed per-passenger metrics.

        Metrics include:
        - Waiting time (hall to boarding)
        - Riding time
        - Total journey time
        - Give-ups
        """
        summary = self.summary()
        print("\n" + "="*80)
        print("   PASSENGER METRICS SUMMARY")
        print("="*80)
        print(f"Arrivals:  {summary['arrivals']:>6}")
        print(f"Completed: {summary['completed']:>6}")
        print(f"Gave up:   {summary['gave_up']:>6}")
        print(f"Door openings: {summary['door_openings']:>6}")

        for title, key in (("Waiting Time (Hall to Boarding)", 'queue_wait'),
                           ("Riding Time", 'ride'),
                           ("Total Journey Time", 'journey')):
            if not summary['completed']:
                break
            stats = summary[key]
            print(f"\n{title}:")
            print(f"  Average: {stats['mean'] / 10:>8.2f} seconds")
            print(f"  P95:     {stats['p95'] / 10:>8.2f} seconds")
            print(f"  Max:     {stats['max'] / 10:>8.2f} seconds")

        print("="*80)
